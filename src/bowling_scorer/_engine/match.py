# Area: Engine
"""
bowling_scorer._engine.match — Match turn scheduler
===================================================

Owns the players of one match in join order and the turn pointer.
Routes each roll to the current player and decides when the turn
passes to the next player.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .frame import LAST_FRAME
from .score_track import PlayerScoreTrack
from ..errors import NoCurrentPlayerError

logger = logging.getLogger("bowling_scorer.engine")


class Match:
    """
    A single bowling match between one or more players.

    Attributes:
        match_id: Unique match identifier
        turn: Index of the player whose roll is accepted next
        tracks: Players' score tracks in join order
    """

    def __init__(self, match_id: str, turn: int = 0):
        self.match_id = match_id
        self.turn = turn
        self.tracks: List[PlayerScoreTrack] = []

    def add_player(self, track: PlayerScoreTrack) -> None:
        self.tracks.append(track)

    def current_player(self) -> PlayerScoreTrack:
        """
        Get the player whose turn it is.

        Raises:
            NoCurrentPlayerError: If the match has no players
        """
        if not self.tracks:
            raise NoCurrentPlayerError(self.match_id)
        return self.tracks[self.turn]

    def get_player(self, player_id: str) -> Optional[PlayerScoreTrack]:
        for track in self.tracks:
            if track.player_id == player_id:
                return track
        return None

    @property
    def finished(self) -> bool:
        return all(track.finished for track in self.tracks)

    def play(self, pins: int) -> bool:
        """
        Record a roll for the current player and advance the turn.

        Args:
            pins: Pins knocked down (0..10)

        Returns:
            True if the roll was recorded, False if it was rejected
            (no players, or the current player has finished)
        """
        if not self.tracks:
            logger.warning(f"[{self.match_id}] Roll rejected: no players")
            return False

        player = self.current_player()
        frame_before = player.frame_no

        if not player.record_roll(pins):
            return False

        if self._should_change_turn(player, frame_before):
            self._advance_turn()
        return True

    @staticmethod
    def _should_change_turn(player: PlayerScoreTrack, frame_before: int) -> bool:
        if frame_before < LAST_FRAME:
            return player.frame_no > frame_before
        return player.finished

    def skip_finished(self) -> None:
        """Move the turn past finished players unless the whole match is over."""
        if not self.tracks or self.finished:
            return
        while self.tracks[self.turn].finished:
            self.turn = (self.turn + 1) % len(self.tracks)

    def _advance_turn(self) -> None:
        """Pass the turn on, skipping players who have already finished."""
        count = len(self.tracks)
        previous = self.turn
        self.turn = (self.turn + 1) % count
        self.skip_finished()
        logger.info(
            f"[{self.match_id}] Turn: {self.tracks[previous].name} → "
            f"{self.tracks[self.turn].name}"
        )
