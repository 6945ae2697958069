# Area: Engine
"""
bowling_scorer._engine.frame — Frame value holder
=================================================

One frame's rolls, bonuses, running total and completion state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .enums import FrameState

ALL_PINS = 10
LAST_FRAME = 10


@dataclass
class Frame:
    """
    Rolls and score bookkeeping for one frame.

    Frames numbered outside 1..10 are sentinels: they are never rolled
    into and always score 0.

    Attributes:
        frame_no: Frame number (-1..13, real frames are 1..10)
        first: Pins knocked down by the first roll
        second: Pins knocked down by the second roll
        third: Pins knocked down by the bonus roll (frame 10 only)
        spare_bonus: Bonus owed to a spare (next single roll)
        strike_bonus: Bonus owed to a strike (next two rolls)
        total: Running total through this frame
        state: Completion state of the frame
    """

    frame_no: int
    first: Optional[int] = None
    second: Optional[int] = None
    third: Optional[int] = None
    spare_bonus: int = 0
    strike_bonus: int = 0
    total: int = 0
    state: FrameState = FrameState.RESERVED

    @property
    def is_strike(self) -> bool:
        return self.first == ALL_PINS

    @property
    def is_spare(self) -> bool:
        if self.first is None or self.second is None:
            return False
        return self.first < ALL_PINS and self.first + self.second == ALL_PINS

    @property
    def is_fixed(self) -> bool:
        return self.state == FrameState.FIXED

    def frame_score(self) -> int:
        """Score contributed by this frame alone (missing rolls count as 0)."""
        rolls = (self.first or 0) + (self.second or 0)
        if self.frame_no == LAST_FRAME:
            return rolls + (self.third or 0)
        return rolls + self.spare_bonus + self.strike_bonus
