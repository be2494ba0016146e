# tests/test_cli.py
# CLI command dispatch against a recording Rich console

from unittest.mock import MagicMock

import pytest
from rich.console import Console

from smart_word.cli.cli import CLI, main
from smart_word.core.smart_word import SmartWord


@pytest.fixture
def cli():
    sw = SmartWord()
    sw.predictor.load("the then this cat sat", is_dictionary=True)
    sw.predictor.load("cat sat")
    return CLI(engine=sw, console=Console(record=True, width=120))


def output(cli):
    return cli.console.export_text()


def test_key_and_accept(cli):
    cli.cmd("/accept cat")
    assert cli.engine.stats()["previous_word"] == "cat"
    assert cli.engine.lexicon.frequency("cat") == 7
    cli.cmd("/key s 0")
    assert "sat" in output(cli)


def test_type_feeds_every_keystroke(cli):
    cli.engine.guess = MagicMock(return_value=["a", "b", "c"])
    cli.cmd("/type th ca")
    calls = [c.args for c in cli.engine.guess.call_args_list]
    assert calls == [("t", 0, 0), ("h", 1, 0), (" ", 2, 0), ("c", 0, 1), ("a", 1, 1)]


def test_suggest_shows_frequencies(cli):
    cli.cmd("/suggest ca")
    text = output(cli)
    assert "cat" in text
    assert "sat:1" in text


def test_load_and_missing_file(cli, tmp_path):
    f = tmp_path / "msgs.txt"
    f.write_text("cat sun\n", encoding="utf-8")
    cli.cmd(f"/load {f}")
    assert cli.engine.lexicon.following("cat") == {"sat": 1, "sun": 1}
    cli.cmd(f"/dict {tmp_path / 'missing.txt'}")
    assert "err:" in output(cli)


def test_eval_and_stats(cli, tmp_path):
    f = tmp_path / "new.txt"
    f.write_text("the cat\n", encoding="utf-8")
    cli.cmd(f"/eval {f}")
    cli.cmd("/stats")
    text = output(cli)
    assert "words guessed : 2/2" in text
    assert "avg eval_time" in text


def test_config_errors_are_reported(cli):
    cli.cmd("/config feedback_boost nope")
    cli.cmd("/config")
    assert "expected int" in output(cli)


def test_quit_and_unknown(cli):
    cli.cmd("/frobnicate")
    assert "unknown cmd" in output(cli)
    cli.cmd("/quit")
    assert not cli.running


def test_main_reports_missing_dictionary(tmp_path):
    assert main(["--words", str(tmp_path / "none.txt")]) == 1
