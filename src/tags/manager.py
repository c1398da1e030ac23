"""Owner-facing tag manager.

This module composes a live tag collection with its version history
and the shared label registry behind one facade.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.constants import DEFAULT_LABEL_MARKER
from core.types import Label, TagSnapshot
from tags.collection import TagCollection
from tags.history import TagHistory
from tags.registry import LabelRegistry


class TagManager:
    """Manage one owner's labels and their checkpointed versions."""

    def __init__(
        self,
        registry: LabelRegistry,
        marker: str = DEFAULT_LABEL_MARKER,
        history: TagHistory | None = None,
    ) -> None:
        """Initialize an empty manager.

        Args:
            registry: Label registry shared across managers.
            marker: Marker character used for label normalization.
            history: Existing history to continue, usually restored state.

        Raises:
            ValueError: If the marker is not one non-whitespace character.
        """
        self._collection = TagCollection(registry, marker=marker)
        self._history = history if history is not None else TagHistory()

    @property
    def collection(self) -> TagCollection:
        return self._collection

    @property
    def history(self) -> TagHistory:
        return self._history

    def exists(self, name: str) -> bool:
        """Return whether the named label is currently present."""
        return self._collection.exists(name)

    def add(self, name: str) -> None:
        """Add a label and register it with the shared registry."""
        self._collection.add(name)

    def delete(self, name: str) -> None:
        """Delete a label if present."""
        self._collection.delete(name)

    def replace_all(self, labels: Iterable[Label]) -> None:
        """Replace the current labels with the given ordered labels."""
        self._collection.replace_all(labels)

    def checkpoint(self) -> TagSnapshot | None:
        """Record the current labels into history when they changed.

        Returns:
            The new snapshot, or None when the state was not novel.
        """
        return self._history.checkpoint(self._collection.labels)

    def versions(self) -> dict[int, tuple[Label, ...]]:
        """Return all recorded versions keyed by sequence number."""
        return self._history.get_all()

    def __iter__(self) -> Iterator[Label]:
        return iter(self._collection)

    def __len__(self) -> int:
        return len(self._collection)
