# config_manager.py - JSON config manager

import json
import os

DEFAULTS = {
    "feedback_boost": 5,  # frequency added per feedback event
    "next_words_cap": 5,  # successor entries kept per word
    "fallback": "fallback",  # placeholder for empty suggestion slots
    "log_level": "WARNING",
    "autosave": True,
}


class Config:
    """
    Small JSON-backed settings store.
    path=None keeps everything in memory (tests, embedded use).
    """

    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if self.path is None:
            return
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
            for k, v in loaded.items():
                if k in self.data:
                    self.data[k] = self._coerce(k, v)
        elif self.data["autosave"]:
            self.save()

    def save(self):
        if self.path is None:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise ValueError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)
        if self.data["autosave"]:
            self.save()

    def _coerce(self, key, val):
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            low = val.strip().lower()
            if low in ("1", "true", "yes", "on"):
                return True
            if low in ("0", "false", "no", "off"):
                return False
            raise ValueError(f"{key}: expected a boolean, got {val!r}")
        try:
            out = kind(val)
        except (TypeError, ValueError):
            raise ValueError(f"{key}: expected {kind.__name__}, got {val!r}") from None
        if key == "next_words_cap" and out < 1:
            raise ValueError("next_words_cap must be >= 1")
        if key == "feedback_boost" and out < 0:
            raise ValueError("feedback_boost must be >= 0")
        return out

    # builders -----------------------------------------------------------
    def predictor_config(self):
        from smart_word.core.predictor import PredictorConfig

        return PredictorConfig(
            feedback_boost=self.data["feedback_boost"],
            fallback=self.data["fallback"],
        )

    def build_lexicon(self):
        from smart_word.core.trie import Lexicon

        return Lexicon(next_words_cap=self.data["next_words_cap"])
