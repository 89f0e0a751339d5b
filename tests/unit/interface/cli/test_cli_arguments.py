from __future__ import annotations

"""
Unit tests for CLI Argument Parsing and the in-process CLI controller.

Verifies:
1. Mapping of CLI flags to configuration overrides.
2. Mutually exclusive transcript sources.
3. Exit codes and output of the controller.
"""

import json
from unittest.mock import patch

import pytest

from fsreplay.domain.errors import TranscriptSourceError
from fsreplay.interface.cli import app
from fsreplay.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the controller from installing root handlers during unit tests."""
    with patch.object(app, "configure_logging"):
        yield


def test_cli_flags_mapping():
    args = parse_args(["--sample", "--threshold", "500", "--strict", "--tree", "--no-sizes"])

    assert args_to_overrides(args) == {
        "prune_threshold": 500,
        "strict": True,
        "render_tree": True,
        "show_sizes": False,
    }


def test_cli_defaults_produce_no_overrides():
    assert args_to_overrides(parse_args([])) == {}


def test_cli_sources_are_mutually_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--sample", "-i", "file.txt"])


def test_main_sample_human_output(capsys):
    assert app.main(["--sample"]) == 0

    out = capsys.readouterr().out
    assert "Total size: 48381165" in out
    assert "Prunable size (<= 100000): 95437" in out


def test_main_sample_json_output(capsys):
    assert app.main(["--sample", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["prunable_size"] == 95437


def test_main_tree_output(capsys):
    assert app.main(["--sample", "--tree", "--no-sizes"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "/"


def test_main_reads_file(tmp_path, capsys):
    transcript = tmp_path / "session.txt"
    transcript.write_text("$ cd /\n$ ls\n10 f\n", encoding="utf-8")

    assert app.main(["-i", str(transcript)]) == 0
    assert "Total size: 10" in capsys.readouterr().out


def test_main_replay_error_exit_code(tmp_path, capsys):
    transcript = tmp_path / "bad.txt"
    transcript.write_text("$ ls\n", encoding="utf-8")

    assert app.main(["-i", str(transcript)]) == 1
    assert "InvalidRoot" in capsys.readouterr().err


def test_main_missing_source(capsys):
    assert app.main([]) == 2
    assert "required" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert app.main(["-i", str(tmp_path / "nope.txt")]) == 2


def test_main_url_uses_env_session(monkeypatch, sample_transcript):
    monkeypatch.setenv("FSREPLAY_SESSION", "secret")
    with patch.object(app, "fetch_transcript", return_value=sample_transcript) as fetch:
        assert app.main(["--url", "https://example.com/input"]) == 0

    fetch.assert_called_once_with(
        "https://example.com/input", session_token="secret", timeout=10
    )


def test_main_url_failure(capsys):
    with patch.object(app, "fetch_transcript", side_effect=TranscriptSourceError("down")):
        assert app.main(["--url", "https://example.com/input"]) == 2
    assert "down" in capsys.readouterr().err


def test_main_dump_config_merges_file(tmp_path, capsys):
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(json.dumps({"prune_threshold": 7, "strict": True}), encoding="utf-8")

    assert app.main(["--config", str(cfg_file), "--threshold", "9", "--dump-config"]) == 0

    dumped = json.loads(capsys.readouterr().out)
    assert dumped["prune_threshold"] == 9
    assert dumped["strict"] is True
