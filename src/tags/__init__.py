"""Tag collection and version history.

This module keeps an owner's ordered label set and a compacted
history of its past states for checkpoint-style versioning.
"""
