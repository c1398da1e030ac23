"""Live ordered tag collection for one owner.

Labels are stored in an immutable tuple that is swapped on every
mutation, so nothing handed to callers can alter collection state.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.constants import DEFAULT_LABEL_MARKER
from core.logging_config import get_logger
from core.types import Label
from tags.labels import is_valid_label_marker, label_names, normalize_label_name
from tags.registry import LabelRegistry

_LOGGER = get_logger(__name__)


class TagCollection:
    """Ordered, duplicate-free sequence of labels.

    All operations are total: empty names, absent labels, and repeated
    adds are silent no-ops rather than errors.
    """

    def __init__(self, registry: LabelRegistry, marker: str = DEFAULT_LABEL_MARKER) -> None:
        """Initialize an empty collection.

        Args:
            registry: Collaborator notified of every non-empty add.
            marker: Marker character used for normalization.

        Raises:
            ValueError: If the marker is not one non-whitespace character.
        """
        if not is_valid_label_marker(marker):
            raise ValueError(f"Label marker must be one non-whitespace character, got {marker!r}.")
        self._registry = registry
        self._marker = marker
        self._labels: tuple[Label, ...] = ()

    @property
    def marker(self) -> str:
        return self._marker

    @property
    def labels(self) -> tuple[Label, ...]:
        """Current labels in insertion order."""
        return self._labels

    def names(self) -> tuple[str, ...]:
        """Return normalized names in insertion order."""
        return label_names(self._labels)

    def exists(self, name: str) -> bool:
        """Return whether a label with the normalized name is present.

        Args:
            name: Label name with or without the marker prefix.

        Returns:
            True iff a matching label is stored.
        """
        normalized_name = normalize_label_name(name, self._marker)
        return any(label.name == normalized_name for label in self._labels)

    def add(self, name: str) -> None:
        """Append a label unless present, then notify the registry.

        The registry is notified even when the label already exists here.
        Empty names are ignored entirely.

        Args:
            name: Label name with or without the marker prefix.
        """
        if not name:
            return
        normalized_name = normalize_label_name(name, self._marker)
        if not self.exists(normalized_name):
            self._labels = self._labels + (Label(name=normalized_name),)
            _LOGGER.debug("label_added", label=normalized_name, size=len(self._labels))
        self._registry.register_if_absent(normalized_name)

    def delete(self, name: str) -> None:
        """Remove a label while preserving the order of the rest.

        Args:
            name: Label name with or without the marker prefix.
        """
        normalized_name = normalize_label_name(name, self._marker)
        if not self.exists(normalized_name):
            return
        self._labels = tuple(label for label in self._labels if label.name != normalized_name)
        _LOGGER.debug("label_deleted", label=normalized_name, size=len(self._labels))

    def replace_all(self, labels: Iterable[Label]) -> None:
        """Replace every stored label with the given ordered labels.

        Later duplicates of a normalized name are dropped. The registry is
        not notified.

        Args:
            labels: Replacement labels in the desired order.
        """
        replacement: dict[str, Label] = {}
        for label in labels:
            normalized_name = normalize_label_name(label.name, self._marker)
            if normalized_name:
                replacement.setdefault(normalized_name, Label(name=normalized_name))
        self._labels = tuple(replacement.values())

    def __iter__(self) -> Iterator[Label]:
        # Reads live storage by index; mutation mid-iteration is not isolated.
        index = 0
        while index < len(self._labels):
            yield self._labels[index]
            index += 1

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)
