# Area: Storage
"""
bowling_scorer._storage.repo_matches — Matches Repository
=========================================================

Repository for the games, players and frames tables. A match is
always written and read as one unit.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .database import BaseRepository
from ..records import FrameRecord, MatchRecord, PlayerRecord

FRAME_NUMBERS = range(1, 11)


class MatchRepository(BaseRepository):
    """
    Repository for persisted matches.

    Handles creating, loading, saving, listing and deleting matches.
    """

    def create_match(
        self, match_id: str, players: Sequence[Tuple[str, str]]
    ) -> None:
        """
        Insert a new match with fresh frames for every player.

        Args:
            match_id: Unique match identifier
            players: (player_id, name) pairs in turn order
        """
        statements = [("INSERT INTO games (id) VALUES (?)", (match_id,))]
        for index, (player_id, name) in enumerate(players):
            statements.append((
                """
                INSERT INTO players (id, game_id, name, player_index)
                VALUES (?, ?, ?, ?)
                """,
                (player_id, match_id, name, index),
            ))
            for frame_no in FRAME_NUMBERS:
                statements.append((
                    "INSERT INTO frames (player_id, frame_no) VALUES (?, ?)",
                    (player_id, frame_no),
                ))
        self._transaction("create_match", statements)

    def load_match(self, match_id: str) -> Optional[MatchRecord]:
        """
        Load a match by ID.

        Args:
            match_id: Match identifier to look up

        Returns:
            MatchRecord or None if not found
        """
        game = self._fetch_one("SELECT * FROM games WHERE id = ?", (match_id,))
        if game is None:
            return None

        players = self._fetch(
            "SELECT * FROM players WHERE game_id = ? ORDER BY player_index",
            (match_id,),
        )
        return MatchRecord(
            match_id=game["id"],
            status=game["status"],
            turn_index=game["turn_index"],
            players=[self._load_player(row) for row in players],
        )

    def _load_player(self, row: Dict[str, Any]) -> PlayerRecord:
        frames = self._fetch(
            "SELECT * FROM frames WHERE player_id = ? ORDER BY frame_no",
            (row["id"],),
        )
        return PlayerRecord(
            player_id=row["id"],
            name=row["name"],
            player_index=row["player_index"],
            current_frame=row["current_frame"],
            state=row["state"],
            frames=[
                FrameRecord(
                    frame_no=f["frame_no"],
                    first_roll=f["first_roll"],
                    second_roll=f["second_roll"],
                    third_roll=f["third_roll"],
                    spare_bonus=f["spare_bonus"],
                    strike_bonus=f["strike_bonus"],
                    total=f["total"],
                    state=f["state"],
                )
                for f in frames
            ],
        )

    def save_match(self, record: MatchRecord) -> None:
        """
        Write the full state of a match in one transaction.

        Args:
            record: Snapshot produced by the engine
        """
        statements = [(
            "UPDATE games SET status = ?, turn_index = ? WHERE id = ?",
            (record.status, record.turn_index, record.match_id),
        )]
        for player in record.players:
            statements.append((
                "UPDATE players SET current_frame = ?, state = ? WHERE id = ?",
                (player.current_frame, player.state, player.player_id),
            ))
            for frame in player.frames:
                statements.append((
                    """
                    INSERT INTO frames
                    (player_id, frame_no, first_roll, second_roll, third_roll,
                     spare_bonus, strike_bonus, total, state)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT (player_id, frame_no) DO UPDATE SET
                        first_roll = excluded.first_roll,
                        second_roll = excluded.second_roll,
                        third_roll = excluded.third_roll,
                        spare_bonus = excluded.spare_bonus,
                        strike_bonus = excluded.strike_bonus,
                        total = excluded.total,
                        state = excluded.state
                    """,
                    (
                        player.player_id, frame.frame_no,
                        frame.first_roll, frame.second_roll, frame.third_roll,
                        frame.spare_bonus, frame.strike_bonus,
                        frame.total, frame.state,
                    ),
                ))
        self._transaction("save_match", statements)

    def list_matches(self, limit: int = 20) -> List[Dict[str, Any]]:
        """
        Get the most recent matches.

        Args:
            limit: Maximum number of matches to return

        Returns:
            Match summaries (id, status, start_time, players) newest first
        """
        matches = self._fetch(
            """
            SELECT id, status, start_time FROM games
            ORDER BY start_time DESC, rowid DESC
            LIMIT ?
            """,
            (limit,),
        )
        for match in matches:
            players = self._fetch(
                "SELECT name FROM players WHERE game_id = ? ORDER BY player_index",
                (match["id"],),
            )
            match["players"] = ", ".join(p["name"] for p in players) or None
        return matches

    def delete_match(self, match_id: str) -> None:
        """Delete a match with its players and frames."""
        self._transaction("delete_match", [
            (
                """
                DELETE FROM frames WHERE player_id IN
                (SELECT id FROM players WHERE game_id = ?)
                """,
                (match_id,),
            ),
            ("DELETE FROM players WHERE game_id = ?", (match_id,)),
            ("DELETE FROM games WHERE id = ?", (match_id,)),
        ])
