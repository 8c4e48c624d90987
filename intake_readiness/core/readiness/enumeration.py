"""Field enumeration: which template fields count toward readiness.

Walks the template in order and emits one TrackedField per countable
field (per repeat instance for repeatable sections). Heading context is
computed as a fold over each section's fields carrying
(current heading, fields seen so far).
"""

from dataclasses import dataclass
from functools import reduce
from typing import Optional

from intake_readiness.core.logging import get_logger
from intake_readiness.core.readiness.policy import ExclusionPolicy
from intake_readiness.core.readiness.responses import ResponseResolver
from intake_readiness.core.readiness.types import (
    KNOWN_KINDS,
    UNCOUNTED_KINDS,
    IntakeTemplate,
    TemplateField,
    TemplateSection,
    TrackedField,
)

logger = get_logger(__name__)

HEADING_SEPARATOR = " — "


# =============================================================================
# Heading context
# =============================================================================


@dataclass(frozen=True)
class HeadingFold:
    """Accumulator threaded through a section's fields."""

    heading: Optional[str]
    entries: tuple[tuple[Optional[str], TemplateField], ...] = ()


def _fold_field(state: HeadingFold, field: TemplateField) -> HeadingFold:
    if field.is_heading:
        # A blank heading label keeps the heading already in effect
        return HeadingFold(heading=field.label.strip() or state.heading, entries=state.entries)
    return HeadingFold(heading=state.heading, entries=state.entries + ((state.heading, field),))


def assign_headings(
    fields: list[TemplateField], initial_heading: Optional[str]
) -> list[tuple[Optional[str], TemplateField]]:
    """
    Pair every non-heading field with the heading in effect above it.

    Args:
        fields: A section's fields in template order
        initial_heading: Heading before any heading pseudo-field (the section title)

    Returns:
        List of (heading, field) pairs; heading pseudo-fields are consumed
    """
    start = HeadingFold(heading=(initial_heading or "").strip() or None)
    return list(reduce(_fold_field, fields, start).entries)


def display_label(raw_label: str, heading: Optional[str], generic_labels: frozenset[str]) -> str:
    """Prefix generic labels ("Email", "Name", ...) with their heading."""
    if raw_label in generic_labels and heading:
        return f"{heading}{HEADING_SEPARATOR}{raw_label}"
    return raw_label


# =============================================================================
# Enumeration
# =============================================================================


@dataclass(frozen=True)
class FieldEnumeration:
    """Result of walking a template."""

    fields: tuple[TrackedField, ...]
    template_field_count: int  # fields contributed by sections, before injection
    min_total_fields: int

    @property
    def total(self) -> int:
        if self.template_field_count == 0:
            return max(len(self.fields), self.min_total_fields)
        return len(self.fields)


def _is_counted(
    field: TemplateField,
    policy: ExclusionPolicy,
    conditional: frozenset[str],
) -> bool:
    if field.type in UNCOUNTED_KINDS:
        return False
    if policy.is_static_excluded(field.id):
        return False
    return field.id not in conditional


def _section_fields(
    section: TemplateSection,
    resolver: ResponseResolver,
    policy: ExclusionPolicy,
    conditional: frozenset[str],
) -> list[TrackedField]:
    pairs = [
        (heading, f)
        for heading, f in assign_headings(section.fields, section.title)
        if _is_counted(f, policy, conditional)
    ]

    for _, f in pairs:
        if f.type not in KNOWN_KINDS:
            logger.warning(
                f"Unknown field type '{f.type}' for {section.id}.{f.id}; counting as text"
            )

    if not section.repeatable:
        return [
            TrackedField(
                field_id=f.id,
                label=display_label(f.label, heading, policy.generic_labels),
                raw_label=f.label,
                section_id=section.id,
                heading=heading,
            )
            for heading, f in pairs
        ]

    instances = resolver.repeat_count(
        section, section.max_repeat or policy.default_max_repeat
    )
    tracked: list[TrackedField] = []
    for index in range(instances):
        for heading, f in pairs:
            if index > 0 and heading:
                heading = f"{heading} #{index + 1}"
            tracked.append(
                TrackedField(
                    field_id=f.id,
                    label=display_label(f.label, heading, policy.generic_labels),
                    raw_label=f.label,
                    section_id=section.id,
                    heading=heading,
                    repeat_index=index,
                )
            )
    return tracked


def enumerate_fields(
    template: IntakeTemplate,
    resolver: ResponseResolver,
    policy: ExclusionPolicy,
    conditional: frozenset[str] = frozenset(),
) -> FieldEnumeration:
    """
    Build the authoritative list of fields that count toward readiness.

    Args:
        template: Intake template
        resolver: Response lookups (used to size repeatable sections)
        policy: Exclusion policy
        conditional: Field ids excluded by relationship group state

    Returns:
        FieldEnumeration with tracked fields in template order, followed by
        any always-tracked fields the template omits
    """
    tracked: list[TrackedField] = []
    for section in template.sections:
        if section.id in policy.excluded_section_ids:
            logger.debug(f"Skipping excluded section {section.id}")
            continue
        tracked.extend(_section_fields(section, resolver, policy, conditional))

    template_field_count = len(tracked)

    present = template.field_ids()
    for extra in policy.always_tracked:
        if extra.field_id in present:
            continue
        tracked.append(
            TrackedField(
                field_id=extra.field_id,
                label=extra.label,
                raw_label=extra.label,
                section_id=extra.section_id,
                heading=extra.heading,
            )
        )

    return FieldEnumeration(
        fields=tuple(tracked),
        template_field_count=template_field_count,
        min_total_fields=policy.min_total_fields,
    )
