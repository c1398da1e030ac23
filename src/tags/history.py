"""Append-only history of tag collection snapshots.

A snapshot is recorded only when the offered state differs from the
most recent one, and an empty state is never recorded first. The key
of a snapshot is its position in the history.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.errors import TagbookHistoryError
from core.logging_config import get_logger
from core.types import Label, TagSnapshot
from tags.labels import label_names

_LOGGER = get_logger(__name__)


class TagHistory:
    """Compacted, linear version log for one tag collection."""

    def __init__(self, snapshots: Iterable[Sequence[Label]] = ()) -> None:
        """Initialize history, optionally from previously stored snapshots.

        Args:
            snapshots: Ordered label sequences, keyed by position.

        Raises:
            TagbookHistoryError: If the first snapshot is empty or two
                adjacent snapshots are equal.
        """
        self._snapshots: tuple[tuple[Label, ...], ...] = ()
        for version, labels in enumerate(snapshots):
            current_labels = tuple(labels)
            if not self._is_novel(current_labels):
                raise TagbookHistoryError(
                    f"Snapshot {version} is empty or repeats the previous snapshot. "
                    "The first snapshot must be non-empty and adjacent snapshots must differ."
                )
            self._snapshots = self._snapshots + (current_labels,)

    @property
    def next_key(self) -> int:
        """Key the next recorded snapshot will receive."""
        return len(self._snapshots)

    def checkpoint(self, current: Sequence[Label]) -> TagSnapshot | None:
        """Record the current labels if they differ from the latest snapshot.

        Args:
            current: Live ordered labels of the collection.

        Returns:
            The recorded snapshot, or None when nothing was recorded.
        """
        current_labels = tuple(current)
        if not self._is_novel(current_labels):
            return None
        snapshot = TagSnapshot(version=self.next_key, labels=current_labels)
        self._snapshots = self._snapshots + (current_labels,)
        _LOGGER.info(
            "snapshot_recorded",
            version=snapshot.version,
            label_count=len(current_labels),
        )
        return snapshot

    def get_all(self) -> dict[int, tuple[Label, ...]]:
        """Return every snapshot keyed by version in ascending order."""
        return dict(enumerate(self._snapshots))

    def snapshots(self) -> tuple[TagSnapshot, ...]:
        """Return every snapshot as typed values in version order."""
        return tuple(
            TagSnapshot(version=version, labels=labels)
            for version, labels in enumerate(self._snapshots)
        )

    def latest(self) -> TagSnapshot | None:
        """Return the most recent snapshot, or None when history is empty."""
        if not self._snapshots:
            return None
        return TagSnapshot(version=self.next_key - 1, labels=self._snapshots[-1])

    def _is_novel(self, current_labels: tuple[Label, ...]) -> bool:
        if not self._snapshots:
            return bool(current_labels)
        # Only the immediately preceding snapshot is compared.
        return label_names(self._snapshots[-1]) != label_names(current_labels)

    def __len__(self) -> int:
        return len(self._snapshots)
