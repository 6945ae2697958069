"""
bowling_scorer.scoreboard — Score card display data
===================================================

Builds per-player, per-frame display rows from a Match and renders
them as a plain-text score card.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ._engine.frame import ALL_PINS, LAST_FRAME, Frame
from ._engine.match import Match
from ._engine.score_track import PlayerScoreTrack
from ._engine.validator import max_pins


@dataclass
class FrameCell:
    """One frame as shown on the score card."""
    frame_no: int
    marks: List[str]
    total: Optional[int]


@dataclass
class PlayerRow:
    """One player's line on the score card."""
    player_id: str
    name: str
    frames: List[FrameCell]
    total: int
    is_current: bool
    finished: bool


@dataclass
class Scoreboard:
    """Everything a front end needs to draw a match."""
    match_id: str
    finished: bool
    current_player: Optional[str]
    current_frame: Optional[int]
    max_pins: int
    rows: List[PlayerRow] = field(default_factory=list)


def roll_mark(pins: Optional[int]) -> str:
    if pins is None:
        return ""
    if pins == ALL_PINS:
        return "X"
    if pins == 0:
        return "-"
    return str(pins)


def frame_marks(frame: Frame) -> List[str]:
    """Conventional score card marks: X for strike, / for spare, - for a miss."""
    if frame.frame_no != LAST_FRAME:
        if frame.is_strike:
            return ["X", ""]
        second = "/" if frame.is_spare else roll_mark(frame.second)
        return [roll_mark(frame.first), second]

    marks = [roll_mark(frame.first), roll_mark(frame.second), roll_mark(frame.third)]
    if frame.first is not None and frame.second is not None:
        if frame.is_spare:
            marks[1] = "/"
        elif frame.is_strike and frame.second < ALL_PINS and frame.third is not None \
                and frame.second + frame.third == ALL_PINS:
            marks[2] = "/"
    return marks


def _shown_total(frame: Frame) -> Optional[int]:
    return frame.total if frame.is_fixed else None


def _player_row(track: PlayerScoreTrack, is_current: bool) -> PlayerRow:
    cells = []
    resolved = True
    for frame in track.real_frames():
        total = _shown_total(frame) if resolved else None
        resolved = resolved and total is not None
        cells.append(FrameCell(frame.frame_no, frame_marks(frame), total))
    return PlayerRow(
        player_id=track.player_id,
        name=track.name,
        frames=cells,
        total=track.total,
        is_current=is_current,
        finished=track.finished,
    )


def build_scoreboard(match: Match) -> Scoreboard:
    """Build display data for every player of a match."""
    current = None if match.finished or not match.tracks else match.current_player()
    return Scoreboard(
        match_id=match.match_id,
        finished=match.finished,
        current_player=current.name if current else None,
        current_frame=current.frame_no if current else None,
        max_pins=max_pins(current) if current else 0,
        rows=[
            _player_row(track, track is current)
            for track in match.tracks
        ],
    )


def render_scoreboard(match: Match) -> str:
    """Render the score card as a fixed-width text table."""
    board = build_scoreboard(match)
    name_width = max([len(row.name) for row in board.rows] + [6])
    header = "Player".ljust(name_width) + " │" + "".join(
        f"{n:^9}│" for n in range(1, LAST_FRAME + 1)
    ) + " Total"
    lines = [header, "─" * len(header)]

    for row in board.rows:
        marker = "▶ " if row.is_current else "  "
        marks = "".join(f"{' '.join(m or ' ' for m in cell.marks):^9}│" for cell in row.frames)
        totals = "".join(
            f"{'' if cell.total is None else cell.total:^9}│" for cell in row.frames
        )
        lines.append(f"{row.name.ljust(name_width)} │{marks}")
        lines.append(f"{marker.ljust(name_width)} │{totals} {row.total}")

    if board.finished:
        lines.append("Match finished")
    else:
        lines.append(
            f"Up next: {board.current_player} (frame {board.current_frame}, "
            f"0-{board.max_pins} pins)"
        )
    return "\n".join(lines)
