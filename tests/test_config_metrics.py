# tests/test_config_metrics.py
import json

import pytest

from smart_word.core.predictor import PredictorConfig
from smart_word.utils.config_manager import DEFAULTS, Config
from smart_word.utils.logger_utils import Log
from smart_word.utils.metrics_tracker import Metrics


def test_defaults_in_memory():
    cfg = Config(path=None)
    assert cfg.data == DEFAULTS
    assert cfg.predictor_config() == PredictorConfig()
    assert cfg.build_lexicon().next_words_cap == 5


def test_file_is_created_and_merged(tmp_path):
    path = tmp_path / "config.json"
    Config(path=str(path))
    assert json.loads(path.read_text())["feedback_boost"] == 5

    path.write_text(json.dumps({"feedback_boost": "7", "unknown": 1}))
    cfg = Config(path=str(path))
    assert cfg.get("feedback_boost") == 7
    assert "unknown" not in cfg.data


def test_set_persists_and_validates(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(path=str(path))
    cfg.set("autosave", "yes")
    cfg.set("next_words_cap", "3")
    assert json.loads(path.read_text())["next_words_cap"] == 3
    with pytest.raises(ValueError):
        cfg.set("nope", 1)
    with pytest.raises(ValueError):
        cfg.set("feedback_boost", "lots")
    with pytest.raises(ValueError):
        cfg.set("next_words_cap", 0)
    with pytest.raises(ValueError):
        cfg.set("autosave", "maybe")


def test_metrics_average_and_save(tmp_path):
    m = Metrics(path=str(tmp_path / "metrics.json"))
    m.record("guess_time", 1.0)
    m.record("guess_time", 3.0)
    assert m.avg("guess_time") == 2.0
    assert m.avg("missing") == 0.0
    m.save()
    again = Metrics(path=str(tmp_path / "metrics.json"))
    assert again.count("guess_time") == 2


def test_time_block_records_metric(tmp_path, capsys):
    path = tmp_path / "logs" / "sw.log"
    with Log.time_block("block", path=str(path)) as t:
        pass
    assert t.elapsed >= 0.0
    assert "block done" in path.read_text()
    assert "block done" in capsys.readouterr().out
