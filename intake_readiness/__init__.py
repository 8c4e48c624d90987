"""Project intake readiness service."""
