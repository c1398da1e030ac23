"""Unit tests for tag snapshot history."""

from __future__ import annotations

import pytest

from core.errors import TagbookHistoryError
from core.types import Label
from tags.history import TagHistory


def _labels(*names: str) -> list[Label]:
    return [Label(name=name) for name in names]


def test_checkpoint_skips_empty_initial_state() -> None:
    """An empty first checkpoint should record nothing."""
    history = TagHistory()

    snapshot = history.checkpoint([])

    assert snapshot is None
    assert len(history) == 0


def test_checkpoint_records_first_state_at_key_zero() -> None:
    """The first non-empty checkpoint should be version 0."""
    history = TagHistory()

    snapshot = history.checkpoint(_labels("@a"))

    assert snapshot is not None
    assert snapshot.version == 0
    assert history.next_key == 1


def test_checkpoint_twice_without_change_records_once() -> None:
    """Repeating an unchanged checkpoint should not add an entry."""
    history = TagHistory()
    history.checkpoint(_labels("@a", "@b"))

    snapshot = history.checkpoint(_labels("@a", "@b"))

    assert snapshot is None
    assert len(history) == 1


def test_checkpoint_records_reordered_labels() -> None:
    """Order differences should count as a change."""
    history = TagHistory()
    history.checkpoint(_labels("@a", "@b"))

    history.checkpoint(_labels("@b", "@a"))

    assert len(history) == 2


def test_checkpoint_records_empty_after_non_empty() -> None:
    """An empty state after a non-empty one should be recorded."""
    history = TagHistory()
    history.checkpoint(_labels("@a"))

    snapshot = history.checkpoint([])

    assert snapshot is not None
    assert history.get_all()[1] == ()


def test_checkpoint_compares_only_latest_snapshot() -> None:
    """A state equal to an older version should be recorded again."""
    history = TagHistory()
    history.checkpoint(_labels("@a"))
    history.checkpoint(_labels("@a", "@b"))

    history.checkpoint(_labels("@a"))

    assert list(history.get_all()) == [0, 1, 2]


def test_get_all_result_is_detached_from_history() -> None:
    """Mutating the returned mapping should not alter stored history."""
    history = TagHistory()
    history.checkpoint(_labels("@a"))

    versions = history.get_all()
    versions[0] = ()
    versions[5] = tuple(_labels("@z"))

    assert history.get_all() == {0: (Label(name="@a"),)}


def test_checkpoint_snapshot_is_detached_from_source_list() -> None:
    """Changing the offered list after a checkpoint should not alter history."""
    history = TagHistory()
    current = _labels("@a")
    history.checkpoint(current)

    current.append(Label(name="@b"))

    assert history.get_all()[0] == (Label(name="@a"),)


def test_latest_returns_most_recent_snapshot() -> None:
    """Latest should expose the last recorded version."""
    history = TagHistory()
    assert history.latest() is None
    history.checkpoint(_labels("@a"))
    history.checkpoint(_labels("@b"))

    latest = history.latest()

    assert latest is not None
    assert latest.version == 1
    assert latest.names() == ("@b",)


def test_constructor_accepts_valid_snapshot_sequence() -> None:
    """Restored snapshots should keep their order and keys."""
    history = TagHistory([_labels("@a"), (), _labels("@a")])

    assert list(history.get_all()) == [0, 1, 2]
    assert history.next_key == 3


@pytest.mark.parametrize(
    "snapshots",
    [
        [()],
        [(), _labels("@a")],
        [_labels("@a"), _labels("@a")],
        [_labels("@a"), (), ()],
    ],
)
def test_constructor_rejects_snapshots_breaking_invariants(snapshots) -> None:
    """Empty first snapshots and equal adjacent snapshots should be refused."""
    with pytest.raises(TagbookHistoryError):
        TagHistory(snapshots)
