"""Third-party relationship groups (GC, TPP, SIA).

Each group is a cluster of contact fields for a party that may simply be
the applicant ("Same as Applicant") or may not be known yet. Groups are
declared as data: every historical spelling of the same-as toggle and of
the first detail field is listed, and resolution is first-truthy-wins.

Inclusion rules:
- GC / SIA: member fields count only when details exist and same-as is
  not asserted.
- TPP: contact fields drop out whenever same-as is asserted. The rent /
  occupancy questions describe the unit, so they still count once the
  group is confirmed (same-as asserted or details entered). With neither,
  the whole group is undetermined and nothing in it counts yet.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from intake_readiness.core.readiness.responses import (
    ResponseResolver,
    is_answered,
    is_truthy,
)
from intake_readiness.core.readiness.types import IntakeTemplate, RelationshipState


@dataclass(frozen=True)
class RelationshipGroup:
    """Declarative definition of one relationship group."""

    key: str
    label: str
    tbd_label: str
    same_as_keys: tuple[str, ...]
    detail_keys: tuple[str, ...]
    contact_fields: frozenset[str]
    extra_fields: frozenset[str] = frozenset()

    @property
    def member_fields(self) -> frozenset[str]:
        return self.contact_fields | self.extra_fields

    @property
    def splits_members(self) -> bool:
        """Whether some members stay required when same-as is asserted."""
        return bool(self.extra_fields)


# =============================================================================
# Registry
# =============================================================================

RELATIONSHIP_GROUPS: dict[str, RelationshipGroup] = {
    "gc": RelationshipGroup(
        key="gc",
        label="General Contractor",
        tbd_label="General Contractor (TBD)",
        same_as_keys=("gc_same_as", "gc_same_as_applicant"),
        detail_keys=("gc_name", "gc_company"),
        contact_fields=frozenset({
            "gc_name",
            "gc_company",
            "gc_phone",
            "gc_email",
            "gc_address",
            "gc_dob_tracking",
            "gc_hic_lic",
        }),
    ),
    "tpp": RelationshipGroup(
        key="tpp",
        label="TPP Applicant",
        tbd_label="TPP Applicant (TBD)",
        same_as_keys=("tpp_same_as", "tpp_same_as_applicant"),
        detail_keys=("tpp_name", "tpp_email"),
        contact_fields=frozenset({"tpp_name", "tpp_email"}),
        extra_fields=frozenset({"rent_controlled", "rent_stabilized", "units_occupied"}),
    ),
    "sia": RelationshipGroup(
        key="sia",
        label="Special Inspections (SIA)",
        tbd_label="Special Inspector (TBD)",
        same_as_keys=("sia_same_as", "sia_same_as_applicant"),
        detail_keys=("sia_name", "sia_company"),
        contact_fields=frozenset({
            "sia_name",
            "sia_company",
            "sia_phone",
            "sia_email",
            "sia_number",
            "sia_nys_lic",
        }),
    ),
}


# =============================================================================
# Resolution
# =============================================================================


def group_section_ids(
    group: RelationshipGroup,
    template: IntakeTemplate,
    excluded_section_ids: frozenset[str] = frozenset(),
) -> list[str]:
    """Ids of the template sections holding the group's fields, in template order."""
    ids = group.member_fields | set(group.same_as_keys)
    return [
        section.id
        for section in template.sections
        if section.id not in excluded_section_ids
        and any(f.id in ids for f in section.fields)
    ]


def _resolve_key(resolver: ResponseResolver, section_ids: list[str], key: str) -> Any:
    # Scoped keys in any holding section win over the flat key
    for section_id in section_ids:
        value = resolver.lookup(f"{section_id}_{key}")
        if value is not None:
            return value
    return resolver.lookup(key)


def resolve_relationship(
    group: RelationshipGroup,
    resolver: ResponseResolver,
    section_ids: Union[str, list[str]],
) -> RelationshipState:
    """Resolve same-as and has-details for a single group."""
    if isinstance(section_ids, str):
        section_ids = [section_ids]
    same_as = any(
        is_truthy(_resolve_key(resolver, section_ids, key)) for key in group.same_as_keys
    )
    has_details = any(
        is_answered(_resolve_key(resolver, section_ids, key)) for key in group.detail_keys
    )
    return RelationshipState(group=group.key, same_as=same_as, has_details=has_details)


def resolve_relationships(
    resolver: ResponseResolver,
    default_section_id: str,
    groups: Optional[dict[str, RelationshipGroup]] = None,
    template: Optional[IntakeTemplate] = None,
    excluded_section_ids: frozenset[str] = frozenset(),
) -> dict[str, RelationshipState]:
    """
    Resolve every registered group.

    Toggle and detail keys are scoped by the sections that hold the group
    in ``template``; ``default_section_id`` is used when the template does
    not contain the group (or no template is given).

    Args:
        resolver: Response lookups for the intake
        default_section_id: Fallback section scoping the keys
        groups: Registry to use (defaults to RELATIONSHIP_GROUPS)
        template: Template used to locate each group's section
        excluded_section_ids: Sections ignored when locating groups

    Returns:
        Dict of group key -> RelationshipState, in registry order
    """
    registry = RELATIONSHIP_GROUPS if groups is None else groups
    states: dict[str, RelationshipState] = {}
    for key, group in registry.items():
        section_ids: list[str] = []
        if template is not None:
            section_ids = group_section_ids(group, template, excluded_section_ids)
        states[key] = resolve_relationship(group, resolver, section_ids or [default_section_id])
    return states


def excluded_members(group: RelationshipGroup, state: RelationshipState) -> frozenset[str]:
    """Member field ids that must not count, given the group's state."""
    if group.splits_members:
        if state.same_as:
            return group.contact_fields
        if not state.has_details:
            return group.member_fields
        return frozenset()

    if state.same_as or not state.has_details:
        return group.member_fields
    return frozenset()


def conditional_exclusions(
    states: dict[str, RelationshipState],
    groups: Optional[dict[str, RelationshipGroup]] = None,
) -> frozenset[str]:
    """Union of excluded member ids across all groups."""
    registry = RELATIONSHIP_GROUPS if groups is None else groups
    excluded: set[str] = set()
    for key, state in states.items():
        group = registry.get(key)
        if group is not None:
            excluded |= excluded_members(group, state)
    return frozenset(excluded)


def group_in_template(
    group: RelationshipGroup,
    template: IntakeTemplate,
    excluded_section_ids: frozenset[str] = frozenset(),
) -> bool:
    """Whether the template asks about this group at all."""
    return bool(group_section_ids(group, template, excluded_section_ids))
