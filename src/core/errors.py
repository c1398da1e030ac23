"""Tagbook exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Core tag operations never raise; only configuration and persistence do.
"""

from __future__ import annotations


class TagbookError(Exception):
    """Base exception for all Tagbook failures."""


class TagbookConfigError(TagbookError):
    """Raised for invalid runtime configuration."""


class TagbookStoreError(TagbookError):
    """Raised for tag state persistence failures."""


class TagbookHistoryError(TagbookError):
    """Raised when a snapshot sequence breaks history invariants."""
