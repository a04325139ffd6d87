"""Tests for turmite.domain.heading."""

from __future__ import annotations

import itertools

import pytest

from turmite.domain.heading import Heading, Turn

# Compass case analysis, written out independently of the modular law.
CLOCKWISE = ["NORTH", "EAST", "SOUTH", "WEST"]
EXPECTED_AFTER_TURN: dict[tuple[str, str], str] = {
    ("NORTH", "FORWARD"): "NORTH",
    ("NORTH", "RIGHT"): "EAST",
    ("NORTH", "BACKWARD"): "SOUTH",
    ("NORTH", "LEFT"): "WEST",
    ("EAST", "FORWARD"): "EAST",
    ("EAST", "RIGHT"): "SOUTH",
    ("EAST", "BACKWARD"): "WEST",
    ("EAST", "LEFT"): "NORTH",
    ("SOUTH", "FORWARD"): "SOUTH",
    ("SOUTH", "RIGHT"): "WEST",
    ("SOUTH", "BACKWARD"): "NORTH",
    ("SOUTH", "LEFT"): "EAST",
    ("WEST", "FORWARD"): "WEST",
    ("WEST", "RIGHT"): "NORTH",
    ("WEST", "BACKWARD"): "EAST",
    ("WEST", "LEFT"): "SOUTH",
}


class TestRotate:
    @pytest.mark.parametrize(("facing", "turn"), list(EXPECTED_AFTER_TURN))
    def test_matches_compass_table(self, facing: str, turn: str) -> None:
        result = Heading[facing].rotate(Turn[turn])
        assert result is Heading[EXPECTED_AFTER_TURN[(facing, turn)]]

    @pytest.mark.parametrize(("facing", "turn"), list(itertools.product(Heading, Turn)))
    def test_equals_repeated_clockwise_quarter_turns(self, facing: Heading, turn: Turn) -> None:
        expected = facing
        for _ in range(int(turn)):
            expected = Heading[CLOCKWISE[(CLOCKWISE.index(expected.name) + 1) % 4]]
        assert facing.rotate(turn) is expected

    def test_result_is_always_a_heading(self) -> None:
        for facing, turn in itertools.product(Heading, Turn):
            result = facing.rotate(turn)
            assert isinstance(result, Heading)
            assert 0 <= result < 4

    def test_rotate_accepts_plain_ints(self) -> None:
        assert Heading.WEST.rotate(3) is Heading.SOUTH
        assert Heading.NORTH.rotate(5) is Heading.EAST

    def test_left_and_right_are_inverse(self) -> None:
        for facing in Heading:
            assert facing.left().right() is facing
            assert facing.right().left() is facing

    def test_four_rights_return_home(self) -> None:
        facing = Heading.SOUTH
        for _ in range(4):
            facing = facing.right()
        assert facing is Heading.SOUTH


class TestDelta:
    def test_unit_vectors(self) -> None:
        assert Heading.NORTH.delta == (0, -1)
        assert Heading.EAST.delta == (1, 0)
        assert Heading.SOUTH.delta == (0, 1)
        assert Heading.WEST.delta == (-1, 0)

    def test_every_delta_is_a_unit_step(self) -> None:
        for facing in Heading:
            dx, dy = facing.delta
            assert abs(dx) + abs(dy) == 1

    def test_right_turn_rotates_vector_clockwise_in_screen_coords(self) -> None:
        # With y pointing down, clockwise rotation maps (dx, dy) -> (-dy, dx).
        for facing in Heading:
            dx, dy = facing.delta
            assert facing.right().delta == (-dy, dx)

    def test_north_plus_right_moves_east(self) -> None:
        assert Heading.NORTH.rotate(Turn.RIGHT).delta == (1, 0)


class TestTurnFromWord:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("forward", Turn.FORWARD),
            ("f", Turn.FORWARD),
            ("backward", Turn.BACKWARD),
            ("back", Turn.BACKWARD),
            ("left", Turn.LEFT),
            ("l", Turn.LEFT),
            ("right", Turn.RIGHT),
            ("r", Turn.RIGHT),
            ("RIGHT", Turn.RIGHT),
            ("Left", Turn.LEFT),
            ("BACK", Turn.BACKWARD),
        ],
    )
    def test_known_words(self, word: str, expected: Turn) -> None:
        assert Turn.from_word(word) is expected

    @pytest.mark.parametrize("word", ["", "b", "up", "around", "rightt"])
    def test_unknown_words(self, word: str) -> None:
        with pytest.raises(ValueError, match="Unknown turn"):
            Turn.from_word(word)
