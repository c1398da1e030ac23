"""Shared typed models.

This module defines immutable value objects used by the tag collection,
history, and persistence layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    """One tag label in its normalized form.

    Attributes:
        name: Normalized name, always prefixed with the label marker.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TagSnapshot:
    """Immutable recorded state of a tag collection.

    Attributes:
        version: Sequence key of the snapshot, starting at zero.
        labels: Ordered labels captured at checkpoint time.
    """

    version: int
    labels: tuple[Label, ...]

    def names(self) -> tuple[str, ...]:
        """Return normalized label names in snapshot order."""
        return tuple(label.name for label in self.labels)
