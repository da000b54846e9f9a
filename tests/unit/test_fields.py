"""Unit tests for the field board."""

import pytest

from lettersmith.contexts.editing.fields import FieldBoard
from lettersmith.utils.config import load_config


@pytest.mark.unit
def test_blank_board():
    board = FieldBoard.blank()
    assert len(board) == 10
    assert board.max_length == 20
    assert board.items() == [(i, "") for i in range(10)]


@pytest.mark.unit
def test_labels_fall_back_to_slot_name():
    board = FieldBoard.blank(count=3).with_value(1, "Acme")
    assert [board.label(i) for i in range(3)] == ["Field 1", "Acme", "Field 3"]


@pytest.mark.unit
def test_with_value_truncates_to_max_length():
    board = FieldBoard.blank().with_value(0, "A" * 25)
    assert board.value(0) == "A" * 20


@pytest.mark.unit
def test_with_value_is_immutable_update():
    board = FieldBoard.blank(count=2)
    updated = board.with_value(0, "x")
    assert board.value(0) == ""
    assert updated.value(0) == "x"


@pytest.mark.unit
@pytest.mark.parametrize("index", [-1, 10])
def test_with_value_out_of_range(index):
    with pytest.raises(IndexError):
        FieldBoard.blank().with_value(index, "x")


@pytest.mark.unit
@pytest.mark.parametrize("count, max_length", [(0, 20), (10, 0)])
def test_blank_rejects_non_positive(count, max_length):
    with pytest.raises(ValueError):
        FieldBoard.blank(count=count, max_length=max_length)


@pytest.mark.unit
def test_from_config():
    cfg = load_config(overrides=["fields.count=4", "fields.max_length=5"])
    board = FieldBoard.from_config(cfg.fields)
    assert len(board) == 4
    assert board.with_value(3, "Engineering").value(3) == "Engin"
