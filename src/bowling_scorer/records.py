"""
bowling_scorer.records — Storage record schemas
===============================================

Pydantic models describing a match as it crosses the storage
boundary. The storage collaborator reads and writes these; the
engine is rebuilt from them and snapshotted back into them.

    >>> FrameRecord(frame_no=1, first_roll=7, second_roll=2).model_dump()["state"]
    'RESERVED'
"""

from __future__ import annotations
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class FrameRecord(BaseModel):
    """One stored frame row."""
    frame_no: int
    first_roll: Optional[int] = Field(default=None, ge=0, le=10)
    second_roll: Optional[int] = Field(default=None, ge=0, le=10)
    third_roll: Optional[int] = Field(default=None, ge=0, le=10)
    spare_bonus: int = 0
    strike_bonus: int = 0
    total: int = 0
    state: str = "RESERVED"


class PlayerRecord(BaseModel):
    """One stored player with their frames."""
    player_id: str
    name: str
    player_index: int = 0
    current_frame: int = Field(default=1, ge=1, le=11)
    state: str = "AWAITING_FIRST"
    frames: List[FrameRecord] = Field(default_factory=list)


class MatchRecord(BaseModel):
    """A whole match, persisted as one unit."""
    match_id: str
    status: Literal["playing", "completed"] = "playing"
    turn_index: int = Field(default=0, ge=0)
    players: List[PlayerRecord] = Field(default_factory=list)
