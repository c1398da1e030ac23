"""Public SDK surface for Tagbook.

This module provides a stable import path for tag management users.
It re-exports the manager, its collaborators, and typed models.
"""

from __future__ import annotations

from core.config import TagbookConfig
from core.errors import (
    TagbookConfigError,
    TagbookError,
    TagbookHistoryError,
    TagbookStoreError,
)
from core.types import Label, TagSnapshot
from store.tag_state_store import TagStateStore
from tags.collection import TagCollection
from tags.history import TagHistory
from tags.labels import build_label, normalize_label_name
from tags.manager import TagManager
from tags.registry import InMemoryLabelRegistry, LabelRegistry

__all__ = [
    "InMemoryLabelRegistry",
    "Label",
    "LabelRegistry",
    "TagCollection",
    "TagHistory",
    "TagManager",
    "TagSnapshot",
    "TagStateStore",
    "TagbookConfig",
    "TagbookConfigError",
    "TagbookError",
    "TagbookHistoryError",
    "TagbookStoreError",
    "build_label",
    "normalize_label_name",
]
