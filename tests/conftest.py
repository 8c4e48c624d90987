"""Pytest configuration and fixtures."""

import os

import pytest

from intake_readiness.core.readiness import ExclusionPolicy, IntakeTemplate


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["INTAKE_ENV"] = "test"


@pytest.fixture
def policy():
    """Default exclusion policy, independent of environment settings."""
    return ExclusionPolicy()


def make_template(*sections: dict) -> IntakeTemplate:
    """Build a template from section dicts."""
    return IntakeTemplate.model_validate({"sections": list(sections)})


def text(field_id: str, label: str) -> dict:
    return {"id": field_id, "label": label, "type": "text"}


def heading(field_id: str, label: str) -> dict:
    return {"id": field_id, "label": label, "type": "heading"}


@pytest.fixture
def gc_section():
    """Contractors section holding only the general contractor group."""
    return {
        "id": "contractors_inspections",
        "title": "GC, TPP & Special Inspections",
        "fields": [
            heading("gc_heading", "General Contractor"),
            {"id": "gc_same_as", "label": "Same as Applicant", "type": "checkbox"},
            text("gc_name", "Name"),
            text("gc_company", "Company"),
            {"id": "gc_email", "label": "Email", "type": "email"},
        ],
    }


@pytest.fixture
def tpp_section():
    """Contractors section holding only the TPP group."""
    return {
        "id": "contractors_inspections",
        "title": "GC, TPP & Special Inspections",
        "fields": [
            heading("tpp_heading", "TPP Applicant"),
            {"id": "tpp_same_as", "label": "Same as Applicant", "type": "checkbox"},
            text("tpp_name", "Name"),
            {"id": "tpp_email", "label": "Email", "type": "email"},
            {"id": "rent_controlled", "label": "Rent Controlled?", "type": "select"},
            {"id": "rent_stabilized", "label": "Rent Stabilized?", "type": "select"},
            {"id": "units_occupied", "label": "Occupied Units", "type": "number"},
        ],
    }


@pytest.fixture
def filing_section():
    """Section that already carries both always-tracked fields."""
    return {
        "id": "building_and_scope",
        "title": "Building Details & Scope of Work",
        "fields": [
            {"id": "filing_type", "label": "Filing Type", "type": "select"},
            {"id": "directive_14", "label": "Directive 14?", "type": "select"},
        ],
    }
