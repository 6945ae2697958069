# Area: Service Tests
"""Tests for the match command and read surface."""

import pytest
from bowling_scorer._storage.database import init_database
from bowling_scorer._storage.repo_matches import MatchRepository
from bowling_scorer.errors import MatchNotFoundError, StorageError
from bowling_scorer.service import PlayResult, ScoringService


@pytest.fixture
def service(tmp_path):
    db_path = str(tmp_path / "bowling.db")
    init_database(db_path)
    return ScoringService(MatchRepository(db_path))


def submit_all(service, match_id, rolls):
    result = None
    for pins in rolls:
        result = service.submit_roll(match_id, pins)
        assert result.success, result.error
    return result


class TestCreateMatch:
    """Tests for create_match()."""

    def test_creates_players_in_order(self, service):
        match_id = service.create_match(["Alice", " Bob "])
        match = service.get_match(match_id)
        assert [t.name for t in match.tracks] == ["Alice", "Bob"]
        assert match.current_player().name == "Alice"

    def test_blank_names_dropped(self, service):
        match_id = service.create_match(["Alice", "", "  "])
        assert len(service.get_match(match_id).tracks) == 1

    def test_no_names_raises(self, service):
        with pytest.raises(ValueError):
            service.create_match(["", " "])

    def test_ids_are_unique(self, service):
        assert service.create_match(["A"]) != service.create_match(["A"])


class TestSubmitRoll:
    """Tests for submit_roll()."""

    def test_success_payload(self, service):
        match_id = service.create_match(["Alice", "Bob"])
        result = service.submit_roll(match_id, 10)
        assert result == PlayResult(success=True, current_player="Bob", finished=False)
        assert result.to_dict() == {
            "success": True, "current_player": "Bob", "finished": False,
        }

    def test_roll_is_persisted(self, service):
        match_id = service.create_match(["Alice"])
        submit_all(service, match_id, [7, 2])
        track = service.get_match(match_id).tracks[0]
        assert (track.frame(1).first, track.frame(1).second) == (7, 2)
        assert track.frame_no == 2

    def test_invalid_pins_rejected(self, service):
        match_id = service.create_match(["Alice"])
        result = service.submit_roll(match_id, 11)
        assert result.success is False
        assert result.error == "Invalid pins: 11 (must be between 0 and 10)"
        assert result.to_dict() == {"error": result.error}

    def test_rule_violation_leaves_stored_frame_unchanged(self, service):
        match_id = service.create_match(["Alice"])
        submit_all(service, match_id, [5])

        result = service.submit_roll(match_id, 8)

        assert result.success is False
        assert result.error == "Second roll must be 5 pins or fewer"
        frame = service.get_match(match_id).tracks[0].frame(1)
        assert frame.second is None
        assert frame.total == 5
        assert frame.state.value == "AWAITING_SECOND"

    def test_unknown_match_rejected(self, service):
        result = service.submit_roll("nope", 3)
        assert result.success is False
        assert result.error == "Match 'nope' not found"

    def test_full_match_finishes(self, service):
        match_id = service.create_match(["Alice", "Bob"])
        result = submit_all(service, match_id, [0] * 39)
        assert result.finished is False
        assert result.current_player == "Bob"

        result = service.submit_roll(match_id, 0)
        assert result.finished is True
        assert result.current_player is None

    def test_roll_after_finish_is_stale(self, service):
        match_id = service.create_match(["Alice"])
        submit_all(service, match_id, [10] * 12)
        result = service.submit_roll(match_id, 3)
        assert result.success is False
        assert "already finished" in result.error
        assert service.get_match(match_id).tracks[0].total == 300

    def test_storage_failure_propagates(self, tmp_path):
        service = ScoringService(MatchRepository(str(tmp_path / "uninitialized.db")))
        with pytest.raises(StorageError):
            service.submit_roll("M001", 3)


class TestReadAndDelete:
    """Tests for list, scoreboard and delete operations."""

    def test_scoreboard(self, service):
        match_id = service.create_match(["Alice", "Bob"])
        submit_all(service, match_id, [3])
        board = service.get_scoreboard(match_id)
        assert board.current_player == "Alice"
        assert board.max_pins == 7

    def test_list_matches(self, service):
        service.create_match(["Alice", "Bob"])
        matches = service.list_matches()
        assert len(matches) == 1
        assert matches[0]["players"] == "Alice, Bob"

    def test_delete_match(self, service):
        match_id = service.create_match(["Alice"])
        service.delete_match(match_id)
        with pytest.raises(MatchNotFoundError):
            service.get_match(match_id)

    def test_delete_unknown_match_raises(self, service):
        with pytest.raises(MatchNotFoundError):
            service.delete_match("nope")
