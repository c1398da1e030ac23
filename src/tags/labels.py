"""Label name normalization helpers."""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_LABEL_MARKER
from core.types import Label


def is_valid_label_marker(marker: str) -> bool:
    """Return whether a marker is exactly one non-whitespace character."""
    return len(marker) == 1 and not marker.isspace()


def normalize_label_name(name: str, marker: str = DEFAULT_LABEL_MARKER) -> str:
    """Prefix a bare label name with the marker.

    Args:
        name: Raw label name as supplied by callers.
        marker: Marker character for normalized names.

    Returns:
        Normalized name. Empty input and already-prefixed names are
        returned unchanged; the check is case-sensitive.
    """
    if not name or name.startswith(marker):
        return name
    return f"{marker}{name}"


def build_label(name: str, marker: str = DEFAULT_LABEL_MARKER) -> Label:
    """Build a normalized label from a raw name."""
    return Label(name=normalize_label_name(name, marker))


def label_names(labels: Iterable[Label]) -> tuple[str, ...]:
    """Return normalized names for an ordered label sequence."""
    return tuple(label.name for label in labels)
