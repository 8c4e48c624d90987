"""Response store lookups.

Answers live in a flat key -> value bag. The same logical answer may be
stored under a scoped key (``{section}_{field}``, or
``{section}_{index}_{field}`` for repeat instances) or a flat key
(``{field}``). The scoped key wins when both exist.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from intake_readiness.core.readiness.types import TemplateSection


def is_absent(value: Any) -> bool:
    """Missing, null, empty string or zero-length list."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def is_answered(value: Any) -> bool:
    """
    Whether a resolved value counts as a completed answer.

    Strings need non-whitespace content; lists and dicts need entries;
    booleans count whenever present, so an explicit "No" toggle is an answer.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return True
    return False


_TRUTHY_STRINGS = frozenset({"true", "yes", "y", "1", "on", "checked"})


def is_truthy(value: Any) -> bool:
    """Checkbox-style truthiness across the ways toggles get stored."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return False


class ResponseResolver:
    """Read-only view over one intake's answers."""

    def __init__(self, responses: Optional[Mapping[str, Any]] = None):
        self._responses: Mapping[str, Any] = responses or {}

    def lookup(self, key: str) -> Any:
        """Value stored under a literal key, or None when absent."""
        value = self._responses.get(key)
        return None if is_absent(value) else value

    def resolve(
        self,
        section_id: str,
        field_id: str,
        repeat_index: Optional[int] = None,
    ) -> Any:
        """
        Resolve a field's answer, scoped key first.

        Args:
            section_id: Section the field belongs to
            field_id: Field identifier
            repeat_index: Instance number for repeatable sections

        Returns:
            The stored value, or None when no candidate key holds an answer
        """
        for key in self._candidate_keys(section_id, field_id, repeat_index):
            value = self.lookup(key)
            if value is not None:
                return value
        return None

    def repeat_count(self, section: TemplateSection, max_repeat: int) -> int:
        """
        Number of filled-in instances of a repeatable section.

        Inferred from the highest ``{section}_{n}_{field}`` index present,
        clamped to ``[1, max_repeat]``.
        """
        field_ids = {f.id for f in section.fields if not f.is_heading}
        pattern = re.compile(rf"^{re.escape(section.id)}_(\d+)_(.+)$")

        highest = 0
        for key in self._responses:
            match = pattern.match(key)
            if not match or match.group(2) not in field_ids:
                continue
            if is_absent(self._responses[key]):
                continue
            highest = max(highest, int(match.group(1)))

        return max(1, min(highest + 1, max_repeat))

    @staticmethod
    def _candidate_keys(
        section_id: str, field_id: str, repeat_index: Optional[int]
    ) -> list[str]:
        if repeat_index is None:
            return [f"{section_id}_{field_id}", field_id]
        if repeat_index == 0:
            return [f"{section_id}_0_{field_id}", f"{section_id}_{field_id}", field_id]
        # Later instances never borrow the primary instance's answers
        return [f"{section_id}_{repeat_index}_{field_id}"]
