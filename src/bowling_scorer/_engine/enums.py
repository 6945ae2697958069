# Area: Engine
"""
bowling_scorer._engine.enums — Roll and frame state enums
=========================================================

Defines the closed set of states used by the per-player roll state
machine and by each frame's completion tracking.
"""

from enum import Enum


class RollState(Enum):
    """
    States of a player's roll state machine.

    State transitions (frames 1-9):
    AWAITING_FIRST -> AWAITING_FIRST (strike, frame advances)
    AWAITING_FIRST -> AWAITING_SECOND (non-strike)
    AWAITING_SECOND -> AWAITING_FIRST (frame advances)

    State transitions (frame 10):
    AWAITING_FIRST -> AWAITING_SECOND
    AWAITING_SECOND -> AWAITING_THIRD (strike or spare)
    AWAITING_SECOND -> FINISHED (open frame)
    AWAITING_THIRD -> FINISHED
    """
    AWAITING_FIRST = "AWAITING_FIRST"
    AWAITING_SECOND = "AWAITING_SECOND"
    AWAITING_THIRD = "AWAITING_THIRD"
    FINISHED = "FINISHED"


class FrameState(Enum):
    """
    Completion state of a single frame.

    RESERVED: not yet started
    AWAITING_SECOND / AWAITING_THIRD: rolls still owed in this frame
    PENDING: rolls complete, strike or spare bonus not yet known
    FIXED: final, the frame score can no longer change
    """
    RESERVED = "RESERVED"
    PENDING = "PENDING"
    AWAITING_SECOND = "AWAITING_SECOND"
    AWAITING_THIRD = "AWAITING_THIRD"
    FIXED = "FIXED"
