"""
bowling_scorer.errors — Custom exception classes
================================================

Defines the exception hierarchy for roll submission and storage.
Each exception stores its context for structured logging and for the
rejection payload returned to callers.
"""

from __future__ import annotations
from typing import Optional


class BowlingScorerError(Exception):
    """Base exception for all bowling_scorer package errors."""
    pass


class InvalidPinCountError(BowlingScorerError, ValueError):
    """Raised when a pin count is outside 0..10."""

    def __init__(self, pins: object):
        self.pins = pins
        super().__init__(f"Invalid pins: {pins!r} (must be between 0 and 10)")


class RuleViolationError(BowlingScorerError):
    """Raised when a pin count would knock down more pins than are standing."""

    def __init__(self, pins: int, remaining: int, reason: str):
        self.pins = pins
        self.remaining = remaining
        self.reason = reason
        super().__init__(reason)


class NoCurrentPlayerError(BowlingScorerError):
    """Raised when a match has no players to take a turn."""

    def __init__(self, match_id: Optional[str] = None):
        self.match_id = match_id
        super().__init__(f"No current player in match '{match_id}'")


class StaleOperationError(BowlingScorerError):
    """Raised when a roll is submitted for a player who has already finished."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player '{player_id}' has already finished")


class MatchNotFoundError(BowlingScorerError, LookupError):
    """Raised when a match id is not present in storage."""

    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Match '{match_id}' not found")


class StorageError(BowlingScorerError):
    """Raised when the storage layer fails to read or write a match."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage failure during {operation}: {cause}")
