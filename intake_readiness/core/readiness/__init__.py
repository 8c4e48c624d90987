"""Intake readiness engine.

Computes how complete a project intake form is, given its template
(sections, fields, headings, repeatable sections) and the flat bag of
answers collected so far:
- Total fields that count toward readiness
- How many of them are answered
- Missing field labels, flat and grouped by heading
- TBD entries for contractor / permittee / inspector groups not yet decided

Usage:
    from intake_readiness.core.readiness import compute_intake_readiness

    report = compute_intake_readiness(template, responses)
    print(f"{report.completed_fields}/{report.total_fields} answered")
"""

from intake_readiness.core.readiness.policy import ExclusionPolicy, get_default_policy
from intake_readiness.core.readiness.relationships import RELATIONSHIP_GROUPS, RelationshipGroup
from intake_readiness.core.readiness.score import compute_intake_readiness, compute_pis_status
from intake_readiness.core.readiness.templates import default_pis_template
from intake_readiness.core.readiness.types import (
    IntakeRecord,
    IntakeTemplate,
    PISStatus,
    ReadinessReport,
    TemplateField,
    TemplateSection,
)

__all__ = [
    "compute_intake_readiness",
    "compute_pis_status",
    "default_pis_template",
    "ExclusionPolicy",
    "get_default_policy",
    "RELATIONSHIP_GROUPS",
    "RelationshipGroup",
    "IntakeRecord",
    "IntakeTemplate",
    "PISStatus",
    "ReadinessReport",
    "TemplateField",
    "TemplateSection",
]
