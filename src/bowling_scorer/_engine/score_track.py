# Area: Engine
"""
bowling_scorer._engine.score_track — Per-player roll state machine
==================================================================

Owns one player's frames and applies rolls to them. Resolves strike
and spare bonuses of earlier frames as the rolls that pay them arrive,
then recomputes every running total from scratch.

Frames are held in a fixed list numbered -1..13. Frames -1 and 0 are
zero-scoring sentinels so that "previous" and "two before" lookups
never need a bounds check at the start of a game.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .enums import FrameState, RollState
from .frame import ALL_PINS, LAST_FRAME, Frame
from ..errors import InvalidPinCountError

logger = logging.getLogger("bowling_scorer.engine")

FIRST_SLOT = -1
LAST_SLOT = 13


class PlayerScoreTrack:
    """
    One player's score card and roll state machine.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        frame_no: Frame the next roll goes into (1..10, 11 once done)
        state: Current roll state
        frames: Frames numbered -1..13, indexed by frame_no + 1
    """

    def __init__(
        self,
        player_id: str,
        name: str,
        frames: Optional[List[Frame]] = None,
        frame_no: int = 1,
        state: RollState = RollState.AWAITING_FIRST,
    ):
        self.player_id = player_id
        self.name = name
        self.frame_no = frame_no
        self.state = state
        self.frames: List[Frame] = [
            Frame(n) for n in range(FIRST_SLOT, LAST_SLOT + 1)
        ]
        for frame in frames or []:
            if 1 <= frame.frame_no <= LAST_FRAME:
                self.frames[self._index(frame.frame_no)] = frame
        self._seal_sentinels()

    # ── Frame lookup ─────────────────────────────────────────

    @staticmethod
    def _index(frame_no: int) -> int:
        return frame_no - FIRST_SLOT

    def frame(self, frame_no: int) -> Frame:
        return self.frames[self._index(frame_no)]

    @property
    def current(self) -> Frame:
        return self.frame(self.frame_no)

    @property
    def prev(self) -> Frame:
        return self.frame(self.frame_no - 1)

    @property
    def pprev(self) -> Frame:
        return self.frame(self.frame_no - 2)

    @property
    def finished(self) -> bool:
        return self.frame_no > LAST_FRAME or (
            self.frame_no == LAST_FRAME and self.frame(LAST_FRAME).is_fixed
        )

    @property
    def total(self) -> int:
        """Running total through frame 10."""
        return self.frame(LAST_FRAME).total

    def real_frames(self) -> List[Frame]:
        """Frames 1..10 in order."""
        return [self.frame(n) for n in range(1, LAST_FRAME + 1)]

    # ── Rolling ──────────────────────────────────────────────

    def record_roll(self, pins: int) -> bool:
        """
        Apply one roll to the current frame.

        Args:
            pins: Pins knocked down (0..10)

        Returns:
            True if the roll was recorded, False if the player has
            already finished (nothing is changed)

        Raises:
            InvalidPinCountError: If pins is outside 0..10
        """
        if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= ALL_PINS:
            raise InvalidPinCountError(pins)
        if self.state == RollState.FINISHED or self.finished:
            logger.warning(f"[{self.player_id}] Roll of {pins} rejected: player finished")
            return False

        logger.debug(
            f"[{self.player_id}] Frame {self.frame_no} {self.state.value}: {pins} pins"
        )
        if self.frame_no == LAST_FRAME:
            self._roll_last_frame(pins)
        else:
            self._roll_open_frame(pins)
        self.update_totals()
        if self.finished:
            logger.info(f"[{self.player_id}] Finished with {self.total}")
        return True

    def _roll_open_frame(self, pins: int) -> None:
        """Frames 1-9."""
        if self.state == RollState.AWAITING_FIRST:
            self._first_roll(pins)
        elif self.state == RollState.AWAITING_SECOND:
            self._second_roll(pins)
        elif self.state in (RollState.AWAITING_THIRD, RollState.FINISHED):
            raise ValueError(
                f"Invalid roll state {self.state.value} in frame {self.frame_no}"
            )
        else:
            raise ValueError(f"Unhandled roll state: {self.state!r}")

    def _first_roll(self, pins: int) -> None:
        current = self.current
        current.first = pins
        current.state = FrameState.PENDING if current.is_strike else FrameState.AWAITING_SECOND
        self._resolve_after_first()

        if current.is_strike:
            self.state = RollState.AWAITING_FIRST
            self.frame_no += 1
        else:
            self.state = RollState.AWAITING_SECOND

    def _second_roll(self, pins: int) -> None:
        current = self.current
        current.second = pins
        current.state = FrameState.PENDING if current.is_spare else FrameState.FIXED
        self._resolve_after_second()

        self.state = RollState.AWAITING_FIRST
        self.frame_no += 1

    def _roll_last_frame(self, pins: int) -> None:
        """Frame 10: up to three rolls, no bonuses of its own."""
        frame = self.current
        if self.state == RollState.AWAITING_FIRST:
            frame.first = pins
            frame.state = FrameState.AWAITING_SECOND
            self.state = RollState.AWAITING_SECOND
            self._resolve_after_first()
        elif self.state == RollState.AWAITING_SECOND:
            frame.second = pins
            self._resolve_after_second()
            if frame.is_strike or frame.is_spare:
                frame.state = FrameState.AWAITING_THIRD
                self.state = RollState.AWAITING_THIRD
            else:
                self._finish(frame)
        elif self.state == RollState.AWAITING_THIRD:
            frame.third = pins
            self._finish(frame)
        elif self.state == RollState.FINISHED:
            raise ValueError(f"[{self.player_id}] Roll routed to a finished player")
        else:
            raise ValueError(f"Unhandled roll state: {self.state!r}")

    def _finish(self, frame: Frame) -> None:
        frame.state = FrameState.FIXED
        self.state = RollState.FINISHED

    # ── Bonus resolution ─────────────────────────────────────

    def _resolve_after_first(self) -> None:
        """A first roll pays a spare one frame back and a double strike two back."""
        prev, pprev, current = self.prev, self.pprev, self.current
        if prev.is_spare:
            prev.spare_bonus = current.first
            prev.state = FrameState.FIXED
        if prev.is_strike and pprev.is_strike:
            pprev.strike_bonus = prev.first + current.first
            pprev.state = FrameState.FIXED

    def _resolve_after_second(self) -> None:
        """A second roll pays a strike one frame back."""
        prev, current = self.prev, self.current
        if prev.is_strike:
            prev.strike_bonus = current.first + current.second
            prev.state = FrameState.FIXED

    # ── Totals ───────────────────────────────────────────────

    def update_totals(self) -> None:
        """Recompute every running total from the first sentinel forward."""
        for previous, frame in zip(self.frames, self.frames[1:]):
            frame.total = previous.total + frame.frame_score()

    def _seal_sentinels(self) -> None:
        for frame in self.frames:
            if not 1 <= frame.frame_no <= LAST_FRAME:
                frame.state = FrameState.FIXED
