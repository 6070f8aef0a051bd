"""Tests for half-up rounding helpers."""

from __future__ import annotations

from program_engine.math.rounding import round_half_up, round_to


class TestRoundHalfUp:
    def test_ties_go_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(0.5) == 1

    def test_regular_rounding(self) -> None:
        assert round_half_up(2.49) == 2
        assert round_half_up(2.51) == 3
        assert round_half_up(170.0) == 170


class TestRoundTo:
    def test_one_place(self) -> None:
        assert round_to(4.25) == 4.3
        assert round_to(4.2) == 4.2

    def test_places(self) -> None:
        assert round_to(0.26666, 2) == 0.27
