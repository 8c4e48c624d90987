"""Models for the intake readiness engine."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Template Types
# =============================================================================


class FieldKind(str, Enum):
    """Field kinds a template may declare."""

    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    NUMBER = "number"
    SELECT = "select"
    CHECKBOX = "checkbox"
    CURRENCY = "currency"
    FILE_UPLOAD = "file_upload"
    WORK_TYPE_PICKER = "work_type_picker"
    CHECKBOX_GROUP = "checkbox_group"
    HEADING = "heading"


# Kinds that never count toward text readiness
UNCOUNTED_KINDS = frozenset({
    FieldKind.FILE_UPLOAD.value,
    FieldKind.WORK_TYPE_PICKER.value,
    FieldKind.CHECKBOX_GROUP.value,
})

KNOWN_KINDS = frozenset(kind.value for kind in FieldKind)


class TemplateField(BaseModel):
    """A single field (or heading pseudo-field) in a template section."""

    # Authoring attributes (required, options, width, ...) pass through untouched
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Stable field identifier")
    label: str = Field(default="", description="Human label shown on the form")
    type: str = Field(default=FieldKind.TEXT.value, description="Field kind")

    @property
    def is_heading(self) -> bool:
        return self.type == FieldKind.HEADING.value


class TemplateSection(BaseModel):
    """An ordered group of fields."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., description="Stable section identifier")
    title: str = Field(default="", description="Fallback heading for the section's fields")
    description: Optional[str] = None
    fields: list[TemplateField] = Field(default_factory=list)
    repeatable: bool = Field(default=False, description="Whether the section can repeat")
    max_repeat: Optional[int] = Field(
        default=None, alias="maxRepeat", ge=1, description="Maximum repeat instances"
    )


class IntakeTemplate(BaseModel):
    """Ordered schema of sections defining an intake form."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    sections: list[TemplateSection] = Field(default_factory=list)

    def field_ids(self) -> set[str]:
        """Every field id in the template, headings included."""
        return {f.id for section in self.sections for f in section.fields}


# =============================================================================
# Engine Values
# =============================================================================


@dataclass(frozen=True)
class TrackedField:
    """A field that counts toward readiness, as produced by enumeration."""

    field_id: str
    label: str  # display label, heading-prefixed when the raw label is generic
    raw_label: str
    section_id: str
    heading: Optional[str]
    repeat_index: Optional[int] = None


@dataclass(frozen=True)
class RelationshipState:
    """Resolved same-as / details state of one relationship group."""

    group: str
    same_as: bool
    has_details: bool

    @property
    def undetermined(self) -> bool:
        return not self.same_as and not self.has_details


# =============================================================================
# Report Types
# =============================================================================


class ReadinessReport(BaseModel):
    """Completeness summary for one intake instance."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_fields: int = Field(..., ge=0, alias="totalFields")
    completed_fields: int = Field(..., ge=0, alias="completedFields")
    missing_fields: list[str] = Field(default_factory=list, alias="missingFields")
    missing_by_section: dict[str, list[str]] = Field(
        default_factory=dict, alias="missingBySection"
    )

    @property
    def is_complete(self) -> bool:
        return self.completed_fields >= self.total_fields and not self.missing_fields

    @property
    def percent_complete(self) -> float:
        if self.total_fields == 0:
            return 0.0
        return round(self.completed_fields / self.total_fields * 100, 1)


class IntakeRecord(BaseModel):
    """An intake request as stored by the application."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    title: Optional[str] = None
    status: str = "draft"
    sections: list[TemplateSection] = Field(default_factory=list)
    responses: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None


class PISStatus(BaseModel):
    """Project Information Sheet status shown on the project dashboard."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sent_date: Optional[str] = Field(None, alias="sentDate", description="MM/dd/yyyy")
    total_fields: int = Field(..., ge=0, alias="totalFields")
    completed_fields: int = Field(..., ge=0, alias="completedFields")
    missing_fields: list[str] = Field(default_factory=list, alias="missingFields")
    missing_by_section: dict[str, list[str]] = Field(
        default_factory=dict, alias="missingBySection"
    )
