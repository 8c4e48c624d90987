"""API endpoints for intake readiness."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from intake_readiness.core.logging import get_logger, log_with_context
from intake_readiness.core.readiness import (
    IntakeRecord,
    IntakeTemplate,
    PISStatus,
    ReadinessReport,
    compute_intake_readiness,
    compute_pis_status,
    default_pis_template,
)

logger = get_logger(__name__)

router = APIRouter()


class ReadinessRequest(BaseModel):
    """Template and answers to evaluate."""

    template: IntakeTemplate = Field(..., description="Intake template")
    responses: dict[str, Any] = Field(default_factory=dict, description="Flat answer bag")


@router.post("/readiness", response_model=ReadinessReport)
async def evaluate_readiness(request: ReadinessRequest) -> ReadinessReport:
    """
    Compute the readiness report for a template and its answers.

    Args:
        request: Template plus response store

    Returns:
        ReadinessReport (camelCase keys)

    Raises:
        HTTPException 500: If computation fails
    """
    try:
        report = compute_intake_readiness(request.template, request.responses)
    except Exception as e:
        logger.exception("Failed to compute intake readiness")
        raise HTTPException(
            status_code=500,
            detail="Failed to compute intake readiness",
        ) from e

    log_with_context(
        logger,
        logging.INFO,
        f"Computed intake readiness: {report.completed_fields}/{report.total_fields}",
        missing=len(report.missing_fields),
    )
    return report


@router.post("/pis-status", response_model=PISStatus)
async def get_pis_status(record: IntakeRecord) -> PISStatus:
    """
    Summarize an intake record for the project dashboard.

    Args:
        record: Stored intake record (sections, responses, timestamps)

    Returns:
        PISStatus with sent date and readiness counts

    Raises:
        HTTPException 500: If computation fails
    """
    try:
        return compute_pis_status(record)
    except Exception as e:
        logger.exception(f"Failed to compute PIS status for intake {record.id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to compute PIS status",
        ) from e


@router.get("/templates/default", response_model=IntakeTemplate)
async def get_default_template() -> IntakeTemplate:
    """Return the default Project Information Sheet template."""
    return default_pis_template()
