"""Storage layer for tag state.

This module persists an owner's live labels and snapshot history
as JSON so managers can be restored across process restarts.
"""
