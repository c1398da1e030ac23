"""Core constants used across Tagbook modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".tagbook")
DEFAULT_LABEL_MARKER = "@"
OWNERS_DIR_NAME = "owners"
TAG_STATE_FILE_NAME = "tag_state.json"
TAG_STATE_FORMAT_VERSION = 1
