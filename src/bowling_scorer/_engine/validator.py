# Area: Engine
"""
bowling_scorer._engine.validator — Pin count validation
=======================================================

Rejects pin counts that cannot physically happen given the rolls
already recorded in the current frame. Runs before a roll reaches
the engine; the engine itself only checks the 0..10 range.
"""

from __future__ import annotations
from typing import Optional

from .enums import RollState
from .frame import ALL_PINS, LAST_FRAME
from .score_track import PlayerScoreTrack
from ..errors import InvalidPinCountError, RuleViolationError


def validate_pins(track: PlayerScoreTrack, pins: int) -> Optional[str]:
    """
    Check a proposed pin count against the player's current frame.

    Parameters
    ----------
    track : PlayerScoreTrack
        The player about to roll.
    pins : int
        Proposed pin count.

    Returns
    -------
    Optional[str]
        A human-readable rejection reason, or None if the roll is legal.
    """
    try:
        check_pins(track, pins)
    except (InvalidPinCountError, RuleViolationError) as e:
        return str(e)
    return None


def check_pins(track: PlayerScoreTrack, pins: int) -> None:
    """
    Raise if a proposed pin count is illegal for the player's next roll.

    Raises:
        InvalidPinCountError: If pins is outside 0..10
        RuleViolationError: If pins exceeds the pins left standing
    """
    if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= ALL_PINS:
        raise InvalidPinCountError(pins)

    if track.state == RollState.AWAITING_SECOND:
        frame = track.current
        if track.frame_no == LAST_FRAME and frame.is_strike:
            return
        remaining = ALL_PINS - (frame.first or 0)
        if pins > remaining:
            raise RuleViolationError(
                pins, remaining,
                f"Second roll must be {remaining} pins or fewer",
            )
    elif track.state == RollState.AWAITING_THIRD:
        frame = track.frame(LAST_FRAME)
        if _third_roll_has_fresh_rack(frame.first, frame.second):
            return
        remaining = ALL_PINS - (frame.second or 0)
        if pins > remaining:
            raise RuleViolationError(
                pins, remaining,
                f"Third roll must be {remaining} pins or fewer",
            )


def max_pins(track: PlayerScoreTrack) -> int:
    """Highest pin count the player may record on their next roll."""
    if track.state == RollState.AWAITING_FIRST:
        return ALL_PINS
    if track.state == RollState.AWAITING_SECOND:
        frame = track.current
        if track.frame_no == LAST_FRAME and frame.is_strike:
            return ALL_PINS
        return ALL_PINS - (frame.first or 0)
    if track.state == RollState.AWAITING_THIRD:
        frame = track.frame(LAST_FRAME)
        if _third_roll_has_fresh_rack(frame.first, frame.second):
            return ALL_PINS
        return ALL_PINS - (frame.second or 0)
    return 0


def _third_roll_has_fresh_rack(first: Optional[int], second: Optional[int]) -> bool:
    # Only a strike or spare earns a third roll, so the fallback branch
    # is reached only for score cards restored in an inconsistent state.
    first, second = first or 0, second or 0
    return first == ALL_PINS or second == ALL_PINS or first + second == ALL_PINS
