# tests/test_smart_word.py
# file facade: dictionary vs message files, config plumbing

import pytest

from smart_word.core.smart_word import SmartWord
from smart_word.utils.config_manager import Config


@pytest.fixture
def files(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncar\ncart\nsat\nsun\n", encoding="utf-8")
    old = tmp_path / "old_messages.txt"
    old.write_text("The cat sat.\nthe CAT sat on the mat\n", encoding="utf-8")
    new = tmp_path / "new_messages.txt"
    new.write_text("cat sun\n", encoding="utf-8")
    return words, old, new


def test_dictionary_file_seeds_words_without_bigrams(files):
    words, _, _ = files
    sw = SmartWord(words)
    assert sw.lexicon.size() == 5
    assert sw.lexicon.following("cat") == {}


def test_old_and_new_messages_record_bigrams(files):
    words, old, new = files
    sw = SmartWord(words)
    assert sw.process_old_messages(old) == 9
    assert sw.lexicon.following("cat") == {"sat": 2}
    assert sw.lexicon.frequency("cat") == 3
    sw.process_new_messages(new)
    assert sw.lexicon.following("cat") == {"sat": 2, "sun": 1}


def test_guess_and_feedback_delegate(files):
    words, old, _ = files
    sw = SmartWord(words)
    sw.process_old_messages(old)
    sw.feedback(True, "cat")
    assert sw.guess("s", 0, 1)[0] == "sat"
    assert sw.stats()["previous_word"] == "cat"
    sw.reset()
    assert sw.stats()["previous_word"] is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SmartWord(tmp_path / "nope.txt")


def test_config_flows_into_engine(files):
    words, _, _ = files
    cfg = Config(path=None)
    cfg.set("feedback_boost", "10")
    cfg.set("fallback", "?")
    cfg.set("next_words_cap", 1)
    sw = SmartWord(words, config=cfg)
    sw.feedback(True, "sun")
    assert sw.lexicon.frequency("sun") == 11
    assert sw.guess(" ", 0, 0) == ["?", "?", "?"]
    assert sw.lexicon.next_words_cap == 1
