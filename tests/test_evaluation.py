# tests/test_evaluation.py
# keystroke replay harness

import json

from smart_word.core.smart_word import SmartWord
from smart_word.evaluation import evaluate_lines, evaluate_text, main, write_report


def _engine():
    sw = SmartWord()
    sw.predictor.load("hello help world", is_dictionary=True)
    return sw


def test_replay_counts_guessed_words_and_savings():
    res = evaluate_lines(_engine(), ["Hello world"])
    assert res.words == 2
    assert res.guessed == 2
    assert res.keystrokes == 2
    assert res.letters == 10
    assert res.saved == 8
    assert res.accuracy == 1.0


def test_unknown_word_is_typed_out():
    sw = _engine()
    res = evaluate_text(sw, "zzz\n\n")
    assert res.words == 1
    assert res.guessed == 0
    assert res.keystrokes == 3
    assert res.savings == 0.0
    # each message ends with a space keystroke
    assert sw.predictor.state.previous_word is None


def test_feedback_during_replay_learns_bigrams_anchor():
    sw = SmartWord()
    sw.predictor.load("cat sat\ncat sun\ncat sun", is_dictionary=False)
    res = evaluate_lines(sw, ["cat sat"])
    assert res.guessed == 2
    assert sw.lexicon.frequency("cat") == 3 + 5


def test_empty_input():
    res = evaluate_lines(_engine(), ["", "  ", "!!"])
    d = res.as_dict()
    assert d["words"] == 0
    assert d["accuracy"] == 0.0
    assert d["savings"] == 0.0


def test_report_and_main(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    words = tmp_path / "words.txt"
    words.write_text("hello\nhelp\nworld\n", encoding="utf-8")
    msgs = tmp_path / "new.txt"
    msgs.write_text("hello world\n", encoding="utf-8")
    out = tmp_path / "out.json"

    assert main([str(msgs), "--words", str(words), "--out", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["words"] == 2
    assert data["guessed"] == 2
    assert "build engine done" in (tmp_path / "logs" / "smart_word.log").read_text()

    res = evaluate_lines(_engine(), ["world"])
    write_report(res, tmp_path / "r.json")
    assert json.loads((tmp_path / "r.json").read_text())["saved"] == 4


def test_main_missing_messages(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "missing.txt")]) == 1
