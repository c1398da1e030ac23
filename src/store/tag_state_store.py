"""Filesystem-backed tag state store.

This module saves and restores one tag manager per owner id under
the configured data root.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.config import TagbookConfig
from core.constants import OWNERS_DIR_NAME, TAG_STATE_FILE_NAME
from core.errors import TagbookStoreError
from core.logging_config import get_logger
from store.tag_state_payload import tag_manager_from_payload, tag_state_to_payload
from tags.manager import TagManager
from tags.registry import LabelRegistry

_LOGGER = get_logger(__name__)


class TagStateStore:
    """JSON tag state store keyed by owner id."""

    def __init__(self, config: TagbookConfig) -> None:
        """Initialize tag state store from config.

        Args:
            config: Runtime configuration.
        """
        self._config = config
        self._owners_root = config.data_root / OWNERS_DIR_NAME
        self._owners_root.mkdir(parents=True, exist_ok=True)

    def save(self, owner_id: str, manager: TagManager) -> Path:
        """Persist a manager's labels and versions.

        Args:
            owner_id: Identifier of the entity owning the tags.
            manager: Tag manager to persist.

        Returns:
            Path of the written state file.

        Raises:
            TagbookStoreError: If the owner id is unsafe or writing fails.
        """
        state_path = self._state_path(owner_id)
        payload = tag_state_to_payload(manager)
        try:
            state_path.parent.mkdir(parents=True, exist_ok=True)
            state_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as error:
            raise TagbookStoreError(
                f"Failed to write tag state for owner '{owner_id}' at {state_path}: {error}."
            ) from error
        _LOGGER.info(
            "tag_state_saved",
            owner_id=owner_id,
            label_count=len(manager),
            version_count=len(manager.history),
        )
        return state_path

    def load(self, owner_id: str, registry: LabelRegistry) -> TagManager:
        """Restore a manager previously saved for an owner.

        Args:
            owner_id: Identifier of the entity owning the tags.
            registry: Registry the restored manager will notify on add.

        Returns:
            Restored tag manager.

        Raises:
            TagbookStoreError: If state is missing, unreadable, or invalid.
        """
        state_path = self._state_path(owner_id)
        payload = _read_state_file(state_path)
        manager = tag_manager_from_payload(payload, registry, marker=self._config.label_marker)
        _LOGGER.info(
            "tag_state_loaded",
            owner_id=owner_id,
            label_count=len(manager),
            version_count=len(manager.history),
        )
        return manager

    def list_owners(self) -> list[str]:
        """List owner ids with saved tag state, sorted by name."""
        return sorted(
            owner_dir.name
            for owner_dir in self._owners_root.iterdir()
            if (owner_dir / TAG_STATE_FILE_NAME).is_file()
        )

    def _state_path(self, owner_id: str) -> Path:
        """Return the state file path for an owner.

        Args:
            owner_id: Identifier of the entity owning the tags.

        Returns:
            State file path.

        Raises:
            TagbookStoreError: If the owner id is not a plain directory name.
        """
        if not owner_id or owner_id in {".", ".."} or any(char in owner_id for char in "/\\\x00"):
            raise TagbookStoreError(
                f"Invalid owner id {owner_id!r}: use a non-empty name without "
                "path separators or NUL characters."
            )
        return self._owners_root / owner_id / TAG_STATE_FILE_NAME


def _read_state_file(state_path: Path) -> dict[str, Any]:
    """Read and validate a tag state file.

    Args:
        state_path: State JSON path.

    Returns:
        Parsed state object.

    Raises:
        TagbookStoreError: If the file is missing or invalid.
    """
    if not state_path.exists():
        raise TagbookStoreError(
            f"Tag state not found at {state_path}. Save the owner's tags before loading them."
        )
    try:
        payload = json.loads(state_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise TagbookStoreError(
            f"Failed to parse tag state at {state_path}: {error.msg}. "
            "Restore the file from a backup or delete it to start over."
        ) from error
    except OSError as error:
        raise TagbookStoreError(f"Failed to read tag state at {state_path}: {error}.") from error
    if not isinstance(payload, dict):
        raise TagbookStoreError(
            f"Failed to parse tag state at {state_path}: expected JSON object at top level."
        )
    return payload
