"""Tests for intrinsic records."""

import dataclasses
import logging
from collections.abc import Callable

import pytest

from flyweight.core.record import IntrinsicRecord, RecordFactory, TreeType, format_coordinate
from flyweight.core.types import Fields


def test_record_is_immutable():
    record = IntrinsicRecord(("a", "b"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.fields = ("c",)  # type: ignore[misc]


def test_record_equality_by_fields_and_type():
    assert IntrinsicRecord(("Oak", "Brown", "oak.jpg")) == IntrinsicRecord(
        ("Oak", "Brown", "oak.jpg")
    )
    assert TreeType(("Oak", "Brown", "oak.jpg")) != IntrinsicRecord(("Oak", "Brown", "oak.jpg"))


def test_tree_type_accessors():
    oak = TreeType(("Oak", "Brown", "oak.jpg"))
    assert (oak.name, oak.color, oak.texture) == ("Oak", "Brown", "oak.jpg")


@pytest.mark.parametrize("fields", [(), ("Oak",), ("Oak", "Brown", "oak.jpg", "extra")])
def test_tree_type_requires_three_fields(fields):
    with pytest.raises(ValueError, match="TreeType needs 3 fields"):
        TreeType(fields)


def test_tree_type_has_no_instance_dict():
    """Slotted records carry no per-instance dict where extrinsic state could hide."""
    oak = TreeType(("Oak", "Brown", "oak.jpg"))
    assert not hasattr(oak, "__dict__")


def test_draw_returns_and_logs_line(caplog):
    oak = TreeType(("Oak", "Brown", "oak.jpg"))
    caplog.set_level(logging.INFO, logger="flyweight.core.record")

    line = oak.draw("Monitor", 10, 20.5)

    assert line == "[TREE]: drawing Oak (Brown, oak.jpg) on Monitor at x = 10; y = 20.5"
    assert caplog.messages == [line]


def test_draw_does_not_change_record():
    oak = TreeType(("Oak", "Brown", "oak.jpg"))
    oak.draw("Monitor", 1, 2)
    oak.draw("Paper", 3, 4)
    assert oak.fields == ("Oak", "Brown", "oak.jpg")


def test_plain_record_render():
    record = IntrinsicRecord(("rock", "grey"))
    assert record.render("Map", 1.5, 2) == "[RECORD]: drawing (rock, grey) on Map at x = 1.5; y = 2"


def test_describe():
    assert TreeType(("Oak", "Brown", "oak.jpg")).describe() == {
        "type": "TreeType",
        "name": "Oak",
        "color": "Brown",
        "texture": "oak.jpg",
    }
    assert IntrinsicRecord(("a",)).describe() == {"type": "IntrinsicRecord", "fields": ["a"]}


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (1234567, 1234568),
        (0.1234567, 0.1234568),
        (1e16, 1e16 + 2),
    ],
)
def test_draw_lines_keep_full_coordinate_precision(first, second):
    """Nearby coordinates must never render to the same trace line."""
    oak = TreeType(("Oak", "Brown", "oak.jpg"))

    assert oak.render("Monitor", first, 0) != oak.render("Monitor", second, 0)
    assert oak.render("Monitor", 0, first) != oak.render("Monitor", 0, second)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10, "10"),
        (10.0, "10"),
        (-3.0, "-3"),
        (20.5, "20.5"),
        (1234567, "1234567"),
        (0.1234567, "0.1234567"),
        (float("inf"), "inf"),
    ],
)
def test_format_coordinate(value, expected):
    assert format_coordinate(value) == expected


def test_record_factory_and_fields_are_type_aliases():
    assert Fields.__value__ == tuple[str, ...]
    assert RecordFactory.__value__ == Callable[[Fields], IntrinsicRecord]
