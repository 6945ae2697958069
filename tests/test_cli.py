# Area: Shared Tests
"""Tests for the command-line interface."""

import logging
import pytest
from bowling_scorer._shared.logging_config import JSONFormatter, TerminalFormatter
from bowling_scorer.cli import main, parse_args


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run from a temp dir and undo the package logging setup afterwards."""
    monkeypatch.chdir(tmp_path)
    for key in ("BOWLING_DB_PATH", "BOWLING_LOG_FILE", "BOWLING_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    yield
    pkg_logger = logging.getLogger("bowling_scorer")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler.formatter, (JSONFormatter, TerminalFormatter)):
            pkg_logger.removeHandler(handler)
            handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


def run(capsys, *argv):
    code = main(["--db", "cli.db", *argv])
    out, err = capsys.readouterr()
    return code, out.strip(), err.strip()


class TestParseArgs:
    """Tests for argument parsing."""

    def test_roll_arguments(self):
        args = parse_args(["roll", "M001", "7"])
        assert args.command == "roll"
        assert args.match_id == "M001"
        assert args.pins == 7

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestCommands:
    """Tests for the CLI commands end to end."""

    def test_new_roll_show(self, capsys):
        code, match_id, _ = run(capsys, "new", "Alice", "Bob")
        assert code == 0
        assert match_id

        code, out, _ = run(capsys, "roll", match_id, "10")
        assert code == 0
        assert out == "Up next: Bob"

        code, out, _ = run(capsys, "show", match_id)
        assert code == 0
        assert "Alice" in out
        assert "Up next: Bob" in out

    def test_rejected_roll_exit_code(self, capsys):
        _, match_id, _ = run(capsys, "new", "Alice")
        run(capsys, "roll", match_id, "6")
        code, _, err = run(capsys, "roll", match_id, "5")
        assert code == 1
        assert "Second roll must be 4 pins or fewer" in err

    def test_finished_match(self, capsys):
        _, match_id, _ = run(capsys, "new", "Alice")
        for _ in range(11):
            run(capsys, "roll", match_id, "10")
        code, out, _ = run(capsys, "roll", match_id, "10")
        assert code == 0
        assert out == "Match finished"

    def test_list_and_delete(self, capsys):
        _, match_id, _ = run(capsys, "new", "Alice", "Bob")
        code, out, _ = run(capsys, "list")
        assert code == 0
        assert match_id in out
        assert "Alice, Bob" in out

        code, out, _ = run(capsys, "delete", match_id)
        assert code == 0
        code, _, err = run(capsys, "show", match_id)
        assert code == 1
        assert "not found" in err

    def test_new_without_names_fails(self, capsys):
        code, _, err = run(capsys, "new", " ")
        assert code == 1
        assert "At least one player name" in err
