# smart_word.py
"""
SmartWord - file-level facade.

Purpose:
 - Own a Lexicon + Predictor pair built from a Config
 - Read dictionary / old-message / new-message files and feed them in
 - Same guess()/feedback() API as the Predictor for UI/CLI/evaluation

Reading files is the only I/O here; OSError from a bad path propagates to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from smart_word.core.predictor import Predictor
from smart_word.utils.config_manager import Config

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SmartWord:
    """Facade exposing a small API
    Public API:
      - load_dictionary(path) -> tokens inserted
      - process_old_messages(path) / process_new_messages(path) -> tokens inserted
      - guess(letter, letter_position, word_index) -> [3 suggestions]
      - feedback(is_correct_guess, correct_word)
      - reset()
    """

    def __init__(
        self,
        word_file: Optional[PathLike] = None,
        *,
        config: Optional[Config] = None,
        encoding: str = "utf-8",
    ) -> None:
        self.cfg = config or Config(path=None)
        self.encoding = encoding
        self.lexicon = self.cfg.build_lexicon()
        self.predictor = Predictor(self.lexicon, self.cfg.predictor_config())
        if word_file is not None:
            self.load_dictionary(word_file)

    # Ingestion ---------------------------------------------------------
    def load_dictionary(self, path: PathLike) -> int:
        return self._process_file(path, is_dictionary=True)

    def process_old_messages(self, path: PathLike) -> int:
        return self._process_file(path, is_dictionary=False)

    def process_new_messages(self, path: PathLike) -> int:
        return self._process_file(path, is_dictionary=False)

    def _process_file(self, path: PathLike, *, is_dictionary: bool) -> int:
        p = Path(path)
        text = p.read_text(encoding=self.encoding, errors="replace")
        n = self.predictor.load(text, is_dictionary=is_dictionary)
        logger.info(
            "%s: %d tokens from %s", "dictionary" if is_dictionary else "messages", n, p
        )
        return n

    # Session ---------------------------------------------------------
    def guess(self, letter: str, letter_position: int, word_index: int) -> List[str]:
        return self.predictor.guess(letter, letter_position, word_index)

    def feedback(self, is_correct_guess: bool, correct_word: Optional[str]) -> None:
        self.predictor.feedback(is_correct_guess, correct_word)

    def reset(self) -> None:
        self.predictor.reset()

    def stats(self) -> dict:
        st = self.predictor.state
        return {
            "words": self.lexicon.size(),
            "prefix": st.prefix,
            "previous_word": st.previous_word,
        }
