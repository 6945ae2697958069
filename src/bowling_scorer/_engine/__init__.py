# Area: Engine
"""
Engine - Scoring and turn engine for a single bowling match.

This package handles:
- Frame bookkeeping and bonus resolution
- Per-player roll state machine
- Turn order between players
- Pin count validation
- Snapshot to and restore from storage records
"""

from .enums import RollState, FrameState
from .frame import Frame
from .score_track import PlayerScoreTrack
from .match import Match
from .validator import validate_pins, check_pins, max_pins
from .snapshot import build_match_record, restore_match

__all__ = [
    "RollState",
    "FrameState",
    "Frame",
    "PlayerScoreTrack",
    "Match",
    "validate_pins",
    "check_pins",
    "max_pins",
    "build_match_record",
    "restore_match",
]
