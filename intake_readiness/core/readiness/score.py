"""Main intake readiness computation.

This module orchestrates the readiness report by:
1. Resolving relationship groups (GC / TPP / SIA)
2. Enumerating the fields that count
3. Counting completed answers
4. Reporting missing fields, flat and by heading

Always computed fresh from the inputs (no caching, no I/O).
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from intake_readiness.core.logging import get_logger, log_with_context
from intake_readiness.core.readiness.completion import (
    count_completion,
    report_missing,
    undetermined,
)
from intake_readiness.core.readiness.enumeration import enumerate_fields
from intake_readiness.core.readiness.policy import ExclusionPolicy, get_default_policy
from intake_readiness.core.readiness.relationships import (
    RELATIONSHIP_GROUPS,
    conditional_exclusions,
    group_in_template,
    resolve_relationships,
)
from intake_readiness.core.readiness.responses import ResponseResolver
from intake_readiness.core.readiness.types import (
    IntakeRecord,
    IntakeTemplate,
    PISStatus,
    ReadinessReport,
    TemplateSection,
)

logger = get_logger(__name__)

TemplateInput = Union[IntakeTemplate, list[TemplateSection], list[dict], dict]


def coerce_template(template: TemplateInput) -> IntakeTemplate:
    """
    Accept a template model, a list of sections, or raw dicts.

    Raises:
        ValidationError: If raw data does not describe sections and fields
    """
    if isinstance(template, IntakeTemplate):
        return template
    if isinstance(template, dict):
        return IntakeTemplate.model_validate(template)
    return IntakeTemplate(sections=list(template or []))


def compute_intake_readiness(
    template: TemplateInput,
    responses: Optional[Mapping[str, Any]] = None,
    policy: Optional[ExclusionPolicy] = None,
    intake_id: Optional[str] = None,
) -> ReadinessReport:
    """
    Compute the readiness report for one intake.

    This is the main entry point for intake readiness.

    Args:
        template: Intake template (sections and fields)
        responses: Flat key -> value bag of answers (never modified)
        policy: Exclusion policy; defaults to get_default_policy()
        intake_id: Optional identifier used only for log context

    Returns:
        ReadinessReport with counts and missing labels
    """
    policy = policy or get_default_policy()
    template = coerce_template(template)
    resolver = ResponseResolver(responses)

    # ==========================================================================
    # 1. Relationship groups
    # ==========================================================================
    states = resolve_relationships(
        resolver,
        policy.relationship_section_id,
        template=template,
        excluded_section_ids=policy.excluded_section_ids,
    )
    conditional = conditional_exclusions(states)

    # ==========================================================================
    # 2. Enumerate fields that count
    # ==========================================================================
    enumeration = enumerate_fields(template, resolver, policy, conditional)

    # ==========================================================================
    # 3. Count completion
    # ==========================================================================
    completion = count_completion(enumeration, resolver)

    # ==========================================================================
    # 4. Report missing fields
    # ==========================================================================
    tbd_groups = [
        group
        for group in undetermined(states, RELATIONSHIP_GROUPS)
        if group_in_template(group, template, policy.excluded_section_ids)
    ]
    missing_fields, missing_by_section = report_missing(
        completion.missing, tbd_groups, policy.tbd_heading
    )

    log_with_context(
        logger,
        logging.DEBUG,
        "Computed intake readiness",
        intake_id=intake_id,
        total=completion.total,
        completed=completion.completed,
        missing=len(missing_fields),
        tbd=",".join(g.key for g in tbd_groups) or "none",
    )

    return ReadinessReport(
        total_fields=completion.total,
        completed_fields=completion.completed,
        missing_fields=missing_fields,
        missing_by_section=missing_by_section,
    )


def compute_pis_status(
    record: Union[IntakeRecord, dict, None],
    policy: Optional[ExclusionPolicy] = None,
) -> PISStatus:
    """
    Summarize an intake record for the project dashboard.

    A missing record reports an empty status. A record whose sections are
    empty still gets its sent date and the empty-template floor.

    Args:
        record: Intake record with sections, responses and timestamps, or None
        policy: Exclusion policy; defaults to get_default_policy()

    Returns:
        PISStatus with sent date and readiness counts
    """
    if record is None:
        return PISStatus(sent_date=None, total_fields=0, completed_fields=0)

    if isinstance(record, dict):
        record = IntakeRecord.model_validate(record)

    report = compute_intake_readiness(
        IntakeTemplate(sections=record.sections),
        record.responses,
        policy=policy,
        intake_id=record.id,
    )

    sent_date = record.created_at.strftime("%m/%d/%Y") if record.created_at else None

    if report.completed_fields < report.total_fields:
        logger.info(
            f"Intake {record.id or '<unsaved>'} incomplete: "
            f"{report.completed_fields}/{report.total_fields} fields"
        )

    return PISStatus(
        sent_date=sent_date,
        total_fields=report.total_fields,
        completed_fields=report.completed_fields,
        missing_fields=report.missing_fields,
        missing_by_section=report.missing_by_section,
    )
