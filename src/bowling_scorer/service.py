"""
bowling_scorer.service — Match command and read surface
=======================================================

Ties the engine to its storage collaborator. Every roll follows the
same cycle: restore the match, validate the pin count, play it,
persist the whole match.

Usage:
    service = ScoringService(MatchRepository("bowling.db"))
    match_id = service.create_match(["Alice", "Bob"])
    result = service.submit_roll(match_id, 7)
    if not result.success:
        print(result.error)
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ._engine.match import Match
from ._engine.snapshot import build_match_record, restore_match
from ._engine.validator import check_pins
from ._shared.logging_config import log_rejection
from ._storage.repo_matches import MatchRepository
from .errors import (
    InvalidPinCountError,
    MatchNotFoundError,
    NoCurrentPlayerError,
    RuleViolationError,
    StaleOperationError,
)
from .scoreboard import Scoreboard, build_scoreboard

logger = logging.getLogger("bowling_scorer.service")


@dataclass
class PlayResult:
    """
    Outcome of one roll submission.

    Attributes:
        success: True if the roll was recorded and persisted
        current_player: Display name of the player up next (None once finished)
        finished: True if every player has finished
        error: Rejection reason when success is False
    """

    success: bool
    current_player: Optional[str] = None
    finished: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"error": self.error}
        return {
            "success": True,
            "current_player": self.current_player,
            "finished": self.finished,
        }


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class ScoringService:
    """
    Command and read operations over persisted matches.

    The service holds no match state between calls; callers must not
    submit rolls for the same match concurrently.
    """

    def __init__(self, repository: MatchRepository):
        self.repository = repository

    def create_match(self, player_names: Iterable[str]) -> str:
        """
        Start a new match.

        Args:
            player_names: Display names in turn order (blank names are dropped)

        Returns:
            The new match id

        Raises:
            ValueError: If no non-blank names were given
        """
        names = [name.strip() for name in player_names if name and name.strip()]
        if not names:
            raise ValueError("At least one player name is required")

        match_id = _new_id()
        self.repository.create_match(match_id, [(_new_id(), name) for name in names])
        logger.info(f"[{match_id}] Created match for {', '.join(names)}")
        return match_id

    def get_match(self, match_id: str) -> Match:
        """
        Restore a match from storage.

        Raises:
            MatchNotFoundError: If no match has this id
        """
        record = self.repository.load_match(match_id)
        if record is None:
            raise MatchNotFoundError(match_id)
        return restore_match(record)

    def get_scoreboard(self, match_id: str) -> Scoreboard:
        return build_scoreboard(self.get_match(match_id))

    def submit_roll(self, match_id: str, pins: int) -> PlayResult:
        """
        Record a roll for the match's current player.

        Rejections (bad pin count, rule violation, finished player,
        empty match, unknown match) come back as a PlayResult with an
        error and leave storage untouched. Storage failures propagate.
        """
        try:
            match = self.get_match(match_id)
            player = match.current_player()
            check_pins(player, pins)
            if not match.play(pins):
                raise StaleOperationError(player.player_id)
        except (
            InvalidPinCountError,
            RuleViolationError,
            NoCurrentPlayerError,
            StaleOperationError,
            MatchNotFoundError,
        ) as e:
            log_rejection(e, match_id)
            return PlayResult(success=False, error=str(e))

        self.repository.save_match(build_match_record(match))
        finished = match.finished
        logger.debug(f"[{match_id}] {player.name} rolled {pins}")
        return PlayResult(
            success=True,
            current_player=None if finished else match.current_player().name,
            finished=finished,
        )

    def list_matches(self, limit: int = 20) -> List[Dict[str, Any]]:
        return self.repository.list_matches(limit)

    def delete_match(self, match_id: str) -> None:
        """
        Delete a match.

        Raises:
            MatchNotFoundError: If no match has this id
        """
        if self.repository.load_match(match_id) is None:
            raise MatchNotFoundError(match_id)
        self.repository.delete_match(match_id)
        logger.info(f"[{match_id}] Deleted match")

