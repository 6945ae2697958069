"""
bowling_scorer — Ten-pin bowling scoring and turn engine
========================================================

Quick Start (engine only):
    from bowling_scorer import Match, PlayerScoreTrack
    match = Match("m1")
    match.add_player(PlayerScoreTrack("p1", "Alice"))
    match.play(10)

With persistence:
    from bowling_scorer import ScoringService, MatchRepository, init_database
    init_database("bowling.db")
    service = ScoringService(MatchRepository("bowling.db"))
    match_id = service.create_match(["Alice", "Bob"])
    service.submit_roll(match_id, 7)

Storage Records
---------------
Matches cross the storage boundary as pydantic models:

    from bowling_scorer import MatchRecord, PlayerRecord, FrameRecord
"""

from ._engine import (
    RollState,
    FrameState,
    Frame,
    PlayerScoreTrack,
    Match,
    validate_pins,
    check_pins,
    max_pins,
    build_match_record,
    restore_match,
)
from .records import FrameRecord, PlayerRecord, MatchRecord
from .errors import (
    BowlingScorerError,
    InvalidPinCountError,
    RuleViolationError,
    NoCurrentPlayerError,
    StaleOperationError,
    MatchNotFoundError,
    StorageError,
)
from ._storage import init_database, MatchRepository
from .service import ScoringService, PlayResult
from .scoreboard import build_scoreboard, render_scoreboard

__all__ = [
    # Engine
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
    # Records
    "FrameRecord",
    "PlayerRecord",
    "MatchRecord",
    # Errors
    "BowlingScorerError",
    "InvalidPinCountError",
    "RuleViolationError",
    "NoCurrentPlayerError",
    "StaleOperationError",
    "MatchNotFoundError",
    "StorageError",
    # Storage and service
    "init_database",
    "MatchRepository",
    "ScoringService",
    "PlayResult",
    "build_scoreboard",
    "render_scoreboard",
]
__version__ = "1.0.0"
