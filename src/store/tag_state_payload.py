"""JSON payload conversion for tag manager state.

This module centralizes tag state serialization and validation.
It keeps the state store focused on filesystem flow.
"""

from __future__ import annotations

from typing import Any

from core.constants import DEFAULT_LABEL_MARKER, TAG_STATE_FORMAT_VERSION
from core.errors import TagbookHistoryError, TagbookStoreError
from core.types import Label
from tags.history import TagHistory
from tags.labels import label_names
from tags.manager import TagManager
from tags.registry import LabelRegistry


def tag_state_to_payload(manager: TagManager) -> dict[str, object]:
    """Serialize manager labels and versions into a JSON-safe payload.

    Args:
        manager: Tag manager to serialize.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "format_version": TAG_STATE_FORMAT_VERSION,
        "marker": manager.collection.marker,
        "labels": list(manager.collection.names()),
        "versions": [
            {"version": snapshot.version, "labels": list(snapshot.names())}
            for snapshot in manager.history.snapshots()
        ],
    }


def tag_manager_from_payload(
    payload: dict[str, Any],
    registry: LabelRegistry,
    marker: str = DEFAULT_LABEL_MARKER,
) -> TagManager:
    """Restore a tag manager from a serialized payload.

    Restoring does not notify the registry.

    Args:
        payload: Serialized tag state.
        registry: Registry the restored manager will notify on add.
        marker: Marker character expected on every stored label.

    Returns:
        Restored tag manager.

    Raises:
        TagbookStoreError: If the payload is malformed.
    """
    format_version = payload.get("format_version")
    if format_version != TAG_STATE_FORMAT_VERSION:
        raise TagbookStoreError(
            f"Unsupported tag state format_version {format_version!r}: "
            f"expected {TAG_STATE_FORMAT_VERSION}. Re-save the state with this release."
        )
    stored_marker = payload.get("marker")
    if stored_marker != marker:
        raise TagbookStoreError(
            f"Tag state marker {stored_marker!r} does not match configured marker {marker!r}. "
            "Set TAGBOOK_LABEL_MARKER to the marker the state was saved with."
        )
    labels = _labels_from_payload(payload.get("labels"), "labels", marker)
    snapshots = _snapshots_from_payload(payload.get("versions"), marker)
    try:
        history = TagHistory(snapshots)
    except TagbookHistoryError as error:
        raise TagbookStoreError(f"Invalid tag state versions: {error}") from error
    manager = TagManager(registry, marker=marker, history=history)
    manager.replace_all(labels)
    return manager


def _snapshots_from_payload(raw_versions: object, marker: str) -> list[tuple[Label, ...]]:
    """Parse and validate the version list of a tag state payload.

    Args:
        raw_versions: Raw ``versions`` value.
        marker: Expected label marker.

    Returns:
        Snapshot label tuples in version order.

    Raises:
        TagbookStoreError: If versions are not a contiguous list of label lists.
    """
    if not isinstance(raw_versions, list):
        raise TagbookStoreError("Invalid tag state: 'versions' must be a list of objects.")
    snapshots: list[tuple[Label, ...]] = []
    for expected_version, entry in enumerate(raw_versions):
        version_ok = isinstance(entry, dict) and _is_version_key(
            entry.get("version"), expected_version
        )
        if not version_ok:
            raise TagbookStoreError(
                f"Invalid tag state: expected version {expected_version} at position "
                f"{expected_version}. Version keys must be contiguous from 0."
            )
        field_name = f"versions[{expected_version}].labels"
        snapshots.append(_labels_from_payload(entry.get("labels"), field_name, marker))
    return snapshots


def _is_version_key(raw_version: object, expected_version: int) -> bool:
    """Return whether a stored version key is the expected plain integer."""
    if isinstance(raw_version, bool) or not isinstance(raw_version, int):
        return False
    return raw_version == expected_version


def _labels_from_payload(raw_labels: object, field_name: str, marker: str) -> tuple[Label, ...]:
    """Parse an ordered list of normalized label names.

    Args:
        raw_labels: Raw list value.
        field_name: Payload field used in error messages.
        marker: Expected label marker.

    Returns:
        Parsed labels in stored order.

    Raises:
        TagbookStoreError: If the list or any name is malformed.
    """
    if not isinstance(raw_labels, list):
        raise TagbookStoreError(f"Invalid tag state: '{field_name}' must be a list of names.")
    labels: list[Label] = []
    for name in raw_labels:
        if not isinstance(name, str) or not name.startswith(marker):
            raise TagbookStoreError(
                f"Invalid tag state: '{field_name}' contains {name!r}; "
                f"names must be strings prefixed with '{marker}'."
            )
        labels.append(Label(name=name))
    if len(set(label_names(labels))) != len(labels):
        raise TagbookStoreError(f"Invalid tag state: '{field_name}' contains duplicate names.")
    return tuple(labels)
