"""Exclusion policy for intake readiness.

The policy decides which template fields are never counted (optional
answers, gating toggles, whole sections), which raw labels are too generic
to show without their heading, and which fields are tracked even when a
template forgets them. It is passed into enumeration explicitly so
different templates can carry different policies.
"""

from dataclasses import dataclass, field, replace
from functools import lru_cache

from intake_readiness.core.config import get_settings


@dataclass(frozen=True)
class AlwaysTrackedField:
    """A field appended to the readiness set when the template omits it."""

    field_id: str
    label: str
    section_id: str
    heading: str


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_OPTIONAL_FIELD_IDS = frozenset({
    "apt_numbers",
    "applicant_business_name",
    "owner_title",
    "corp_officer_name",
    "corp_officer_title",
})

# Toggle inputs that steer other fields; every known spelling is listed
DEFAULT_GATING_FIELD_IDS = frozenset({
    "gc_same_as",
    "gc_same_as_applicant",
    "tpp_same_as",
    "tpp_same_as_applicant",
    "sia_same_as",
    "sia_same_as_applicant",
})

DEFAULT_EXCLUDED_SECTION_IDS = frozenset({
    "documents",
    "internal_notes",
})

DEFAULT_GENERIC_LABELS = frozenset({
    "Email",
    "Phone",
    "Full Name",
    "Company / Entity Name",
    "Address",
    "Name",
    "Business Name",
})

DEFAULT_ALWAYS_TRACKED = (
    AlwaysTrackedField(
        field_id="filing_type",
        label="Filing Type",
        section_id="building_and_scope",
        heading="Building Details & Scope of Work",
    ),
    AlwaysTrackedField(
        field_id="directive_14",
        label="Directive 14?",
        section_id="building_and_scope",
        heading="Building Details & Scope of Work",
    ),
)


@dataclass(frozen=True)
class ExclusionPolicy:
    """Immutable rules applied while enumerating readiness fields."""

    optional_field_ids: frozenset[str] = DEFAULT_OPTIONAL_FIELD_IDS
    gating_field_ids: frozenset[str] = DEFAULT_GATING_FIELD_IDS
    excluded_section_ids: frozenset[str] = DEFAULT_EXCLUDED_SECTION_IDS
    generic_labels: frozenset[str] = DEFAULT_GENERIC_LABELS
    always_tracked: tuple[AlwaysTrackedField, ...] = DEFAULT_ALWAYS_TRACKED
    # Floor for templates that yield no countable fields; pending product confirmation
    min_total_fields: int = 7
    tbd_heading: str = "Contractors & Inspections"
    relationship_section_id: str = "contractors_inspections"
    default_max_repeat: int = 4
    extra_exclusions: frozenset[str] = field(default_factory=frozenset)

    def with_overrides(self, **changes) -> "ExclusionPolicy":
        """Copy of this policy with some rules replaced."""
        return replace(self, **changes)

    def is_static_excluded(self, field_id: str) -> bool:
        """Whether a field is excluded regardless of the answers given."""
        return (
            field_id in self.optional_field_ids
            or field_id in self.gating_field_ids
            or field_id in self.extra_exclusions
        )


@lru_cache
def get_default_policy() -> ExclusionPolicy:
    """
    Build the default policy, taking tunables from settings.

    Returns:
        ExclusionPolicy shared by callers that do not pass their own
    """
    settings = get_settings()
    return ExclusionPolicy(
        min_total_fields=settings.READINESS_MIN_TOTAL_FIELDS,
        tbd_heading=settings.READINESS_TBD_HEADING,
        relationship_section_id=settings.RELATIONSHIP_SECTION_ID,
        default_max_repeat=settings.DEFAULT_MAX_REPEAT,
    )
