"""Completion counting and missing-field reporting."""

from collections.abc import Iterable
from dataclasses import dataclass

from intake_readiness.core.readiness.enumeration import FieldEnumeration
from intake_readiness.core.readiness.relationships import RelationshipGroup
from intake_readiness.core.readiness.responses import ResponseResolver, is_answered
from intake_readiness.core.readiness.types import RelationshipState, TrackedField


@dataclass(frozen=True)
class CompletionCount:
    """Answered vs. missing split of the enumerated fields."""

    total: int
    completed: int
    missing: tuple[TrackedField, ...]


def count_completion(
    enumeration: FieldEnumeration, resolver: ResponseResolver
) -> CompletionCount:
    """
    Classify each enumerated field as complete or missing.

    Args:
        enumeration: Output of enumerate_fields
        resolver: Response lookups for the intake

    Returns:
        CompletionCount; total honours the empty-template floor
    """
    missing: list[TrackedField] = []
    completed = 0
    for tracked in enumeration.fields:
        value = resolver.resolve(tracked.section_id, tracked.field_id, tracked.repeat_index)
        if is_answered(value):
            completed += 1
        else:
            missing.append(tracked)

    return CompletionCount(
        total=enumeration.total,
        completed=completed,
        missing=tuple(missing),
    )


def report_missing(
    missing: Iterable[TrackedField],
    undetermined_groups: Iterable[RelationshipGroup],
    tbd_heading: str,
) -> tuple[list[str], dict[str, list[str]]]:
    """
    Build the flat and heading-grouped missing lists.

    Grouped entries use the raw label, since the heading is already the key.
    Undetermined relationship groups add one TBD entry each to the flat list
    and to ``tbd_heading``; those entries are never counted in totals.

    Returns:
        (missing_fields, missing_by_section)
    """
    missing_fields: list[str] = []
    missing_by_section: dict[str, list[str]] = {}

    for tracked in missing:
        missing_fields.append(tracked.label)
        heading = tracked.heading or tracked.section_id
        missing_by_section.setdefault(heading, []).append(tracked.raw_label)

    for group in undetermined_groups:
        missing_fields.append(group.tbd_label)
        missing_by_section.setdefault(tbd_heading, []).append(group.tbd_label)

    return missing_fields, missing_by_section


def undetermined(
    states: dict[str, RelationshipState],
    groups: dict[str, RelationshipGroup],
) -> list[RelationshipGroup]:
    """Groups with neither same-as nor details, in registry order."""
    return [
        group
        for key, group in groups.items()
        if key in states and states[key].undetermined
    ]
