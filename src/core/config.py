"""Runtime configuration model for Tagbook.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_LABEL_MARKER
from core.errors import TagbookConfigError
from tags.labels import is_valid_label_marker


@dataclass(frozen=True)
class TagbookConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for persisted tag state.
        label_marker: Single character every normalized label starts with.
    """

    data_root: Path
    label_marker: str = DEFAULT_LABEL_MARKER

    @classmethod
    def from_env(cls) -> "TagbookConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TagbookConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("TAGBOOK_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        marker_value = os.getenv("TAGBOOK_LABEL_MARKER", DEFAULT_LABEL_MARKER)
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            label_marker=_parse_label_marker(marker_value),
        )


def _parse_label_marker(raw_value: str) -> str:
    """Parse the label marker environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Validated single-character marker.

    Raises:
        TagbookConfigError: If value is not one visible character.
    """
    if not is_valid_label_marker(raw_value):
        raise TagbookConfigError(
            "Invalid TAGBOOK_LABEL_MARKER value: "
            f"expected one non-whitespace character, got '{raw_value}'. "
            "Set TAGBOOK_LABEL_MARKER to a single symbol such as '@' or '#'."
        )
    return raw_value
