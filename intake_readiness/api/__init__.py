"""API router for v1 endpoints."""

from fastapi import APIRouter

from intake_readiness.api import intake

router = APIRouter()

# Intake readiness routes
router.include_router(intake.router, prefix="/intake", tags=["intake"])
