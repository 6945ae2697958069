# Area: Engine Tests
"""Tests for pin count validation."""

import pytest
from bowling_scorer._engine.enums import FrameState, RollState
from bowling_scorer._engine.frame import Frame
from bowling_scorer._engine.score_track import PlayerScoreTrack
from bowling_scorer._engine.validator import check_pins, max_pins, validate_pins
from bowling_scorer.errors import InvalidPinCountError, RuleViolationError


def track_after(rolls):
    track = PlayerScoreTrack("P001", "Alice")
    for pins in rolls:
        track.record_roll(pins)
    return track


class TestRangeCheck:
    """Tests for pins outside 0..10."""

    @pytest.mark.parametrize("pins", [-1, 11, 100])
    def test_out_of_range_rejected(self, pins):
        track = track_after([])
        assert validate_pins(track, pins) == (
            f"Invalid pins: {pins} (must be between 0 and 10)"
        )
        with pytest.raises(InvalidPinCountError):
            check_pins(track, pins)

    @pytest.mark.parametrize("pins", [True, False, 5.0, "5", None])
    def test_non_integer_pins_rejected(self, pins):
        track = track_after([])
        assert validate_pins(track, pins) == (
            f"Invalid pins: {pins!r} (must be between 0 and 10)"
        )
        with pytest.raises(InvalidPinCountError):
            check_pins(track, pins)

    @pytest.mark.parametrize("pins", range(0, 11))
    def test_any_first_roll_allowed(self, pins):
        assert validate_pins(track_after([]), pins) is None


class TestSecondRoll:
    """Tests for the second roll of a frame."""

    def test_second_roll_limited_to_standing_pins(self):
        track = track_after([5])
        assert validate_pins(track, 5) is None
        assert validate_pins(track, 6) == "Second roll must be 5 pins or fewer"

    def test_rule_violation_carries_remaining(self):
        track = track_after([5])
        with pytest.raises(RuleViolationError) as exc_info:
            check_pins(track, 8)
        assert exc_info.value.remaining == 5
        assert exc_info.value.pins == 8

    def test_rejected_roll_leaves_frame_unchanged(self):
        track = track_after([5])
        frame = track.frame(1)
        before = (frame.total, frame.state)
        assert validate_pins(track, 8) is not None
        assert (frame.total, frame.state) == before == (5, FrameState.AWAITING_SECOND)

    def test_tenth_frame_after_strike_allows_ten(self):
        track = track_after([0] * 18 + [10])
        assert validate_pins(track, 10) is None

    def test_tenth_frame_without_strike_is_limited(self):
        track = track_after([0] * 18 + [4])
        assert validate_pins(track, 7) == "Second roll must be 6 pins or fewer"
        assert validate_pins(track, 6) is None


class TestThirdRoll:
    """Tests for the tenth frame bonus roll."""

    def test_after_two_strikes_allows_ten(self):
        assert validate_pins(track_after([0] * 18 + [10, 10]), 10) is None

    def test_after_spare_allows_ten(self):
        assert validate_pins(track_after([0] * 18 + [3, 7]), 10) is None

    def test_after_strike_and_partial_allows_ten(self):
        assert validate_pins(track_after([0] * 18 + [10, 3]), 10) is None

    def test_restored_open_frame_is_limited_by_second_roll(self):
        track = PlayerScoreTrack(
            "P001", "Alice",
            frames=[Frame(10, first=3, second=4, state=FrameState.AWAITING_THIRD)],
            frame_no=10,
            state=RollState.AWAITING_THIRD,
        )
        assert validate_pins(track, 6) is None
        assert validate_pins(track, 7) == "Third roll must be 6 pins or fewer"


class TestFinished:
    """Validation leaves finished players to the engine."""

    def test_finished_player_not_rejected_by_validator(self):
        track = track_after([0] * 20)
        assert validate_pins(track, 10) is None


class TestMaxPins:
    """Tests for max_pins()."""

    def test_first_roll(self):
        assert max_pins(track_after([])) == 10

    def test_second_roll(self):
        assert max_pins(track_after([3])) == 7

    def test_tenth_frame_second_after_strike(self):
        assert max_pins(track_after([0] * 18 + [10])) == 10

    def test_tenth_frame_second_after_partial(self):
        assert max_pins(track_after([0] * 18 + [2])) == 8

    def test_tenth_frame_third_after_spare(self):
        assert max_pins(track_after([0] * 18 + [2, 8])) == 10

    def test_finished(self):
        assert max_pins(track_after([0] * 20)) == 0
