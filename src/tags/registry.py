"""Label registry collaborator.

The registry records every label name introduced by any collection
it is shared with. Collections receive it explicitly at construction.
"""

from __future__ import annotations

from typing import Iterator, Protocol


class LabelRegistry(Protocol):
    """Contract consumed by tag collections on every non-empty add."""

    def register_if_absent(self, normalized_name: str) -> None:
        """Record a normalized label name; repeats must be harmless."""


class InMemoryLabelRegistry:
    """Append-only, insertion-ordered set of registered label names."""

    def __init__(self) -> None:
        self._names: dict[str, None] = {}

    def register_if_absent(self, normalized_name: str) -> None:
        """Register a label name once; later registrations are ignored.

        Args:
            normalized_name: Marker-prefixed label name.
        """
        self._names.setdefault(normalized_name, None)

    def names(self) -> tuple[str, ...]:
        """Return registered names in first-registration order."""
        return tuple(self._names)

    def __contains__(self, normalized_name: object) -> bool:
        return normalized_name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
