# Area: Engine
"""
bowling_scorer._engine.snapshot — Match snapshot builder and restorer
=====================================================================

Converts a live Match into a storage record and rebuilds an
equivalent Match from one.
"""

from .enums import FrameState, RollState
from .frame import LAST_FRAME, Frame
from .match import Match
from .score_track import PlayerScoreTrack
from ..records import FrameRecord, MatchRecord, PlayerRecord


def build_match_record(match: Match) -> MatchRecord:
    """Build a storage record for the whole match (frames 1..10 only)."""
    return MatchRecord(
        match_id=match.match_id,
        status="completed" if match.finished else "playing",
        turn_index=match.turn,
        players=[
            _player_record(index, track)
            for index, track in enumerate(match.tracks)
        ],
    )


def _player_record(index: int, track: PlayerScoreTrack) -> PlayerRecord:
    return PlayerRecord(
        player_id=track.player_id,
        name=track.name,
        player_index=index,
        current_frame=track.frame_no,
        state=track.state.value,
        frames=[_frame_record(frame) for frame in track.real_frames()],
    )


def _frame_record(frame: Frame) -> FrameRecord:
    return FrameRecord(
        frame_no=frame.frame_no,
        first_roll=frame.first,
        second_roll=frame.second,
        third_roll=frame.third,
        spare_bonus=frame.spare_bonus,
        strike_bonus=frame.strike_bonus,
        total=frame.total,
        state=frame.state.value,
    )


def restore_match(record: MatchRecord) -> Match:
    """
    Rebuild a Match from its storage record.

    Players are ordered by player_index. Frame numbers outside 1..10
    are ignored and missing frames start out RESERVED. A turn index
    that points at a finished player moves on to the next player
    still bowling.

    Raises:
        ValueError: If a stored roll or frame state is not recognised
    """
    match = Match(record.match_id, turn=record.turn_index)
    for player in sorted(record.players, key=lambda p: p.player_index):
        match.add_player(_restore_track(player))
    if match.tracks and match.turn >= len(match.tracks):
        raise ValueError(
            f"Turn index {match.turn} out of range for {len(match.tracks)} players"
        )
    match.skip_finished()
    return match


def _restore_track(player: PlayerRecord) -> PlayerScoreTrack:
    frames = [
        _restore_frame(f) for f in player.frames if 1 <= f.frame_no <= LAST_FRAME
    ]
    return PlayerScoreTrack(
        player.player_id,
        player.name,
        frames=frames,
        frame_no=player.current_frame,
        state=RollState(player.state),
    )


def _restore_frame(record: FrameRecord) -> Frame:
    return Frame(
        record.frame_no,
        first=record.first_roll,
        second=record.second_roll,
        third=record.third_roll,
        spare_bonus=record.spare_bonus,
        strike_bonus=record.strike_bonus,
        total=record.total,
        state=FrameState(record.state),
    )
