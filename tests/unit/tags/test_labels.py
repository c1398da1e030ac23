"""Unit tests for label normalization."""

from __future__ import annotations

from core.types import Label
from tags.labels import build_label, label_names, normalize_label_name


def test_normalize_label_name_prefixes_bare_name() -> None:
    """Bare names should gain the marker prefix."""
    assert normalize_label_name("work") == "@work"


def test_normalize_label_name_keeps_prefixed_name() -> None:
    """Already-prefixed names should be left unchanged."""
    assert normalize_label_name("@work") == "@work"


def test_normalize_label_name_leaves_empty_string() -> None:
    """The empty string should not be normalized."""
    assert normalize_label_name("") == ""


def test_normalize_label_name_is_case_sensitive() -> None:
    """Normalization should not fold case."""
    assert normalize_label_name("Work") != normalize_label_name("work")


def test_build_label_uses_custom_marker() -> None:
    """Labels should be built with the supplied marker."""
    label = build_label("todo", marker="#")

    assert label == Label(name="#todo")


def test_labels_compare_by_normalized_name() -> None:
    """Labels built from bare and prefixed names should be equal."""
    assert build_label("x") == build_label("@x")
    assert label_names([build_label("a"), build_label("@b")]) == ("@a", "@b")
