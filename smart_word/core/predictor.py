# predictor.py
# Keystroke-driven suggestion session on top of a Lexicon.

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from smart_word.context import is_boundary, is_letter, iter_lines
from smart_word.core.trie import Lexicon

logger = logging.getLogger(__name__)

SUGGESTION_COUNT = 3
FALLBACK = "fallback"
FEEDBACK_BOOST = 5


@dataclass(frozen=True)
class PredictorConfig:
    """
    Knobs for feedback strength and the placeholder used for empty slots.
    """
    feedback_boost: int = FEEDBACK_BOOST
    fallback: str = FALLBACK


@dataclass
class SessionState:
    """
    Typing state of one session.
    prefix: letters of the word being composed
    previous_word: last word confirmed through feedback (bigram anchor)
    """
    prefix: str = ""
    previous_word: Optional[str] = None


class Predictor:
    """
    Stateful suggestion session:
      - load(text, is_dictionary) fills the Lexicon
      - guess(letter, letter_position, word_index) -> exactly 3 suggestions
      - feedback(is_correct_guess, correct_word) boosts and anchors the next word

    The Lexicon may be shared between several Predictors; session state is not.
    Calls never raise on odd input, they degrade to fallback suggestions.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[PredictorConfig] = None,
    ) -> None:
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        self.cfg = config or PredictorConfig()
        self._state = SessionState()

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    def load(self, text: str, is_dictionary: bool = False) -> int:
        """
        Insert every normalized token of `text`.
        Corpus text (is_dictionary=False) also records each adjacent pair
        within a line as a bigram. Returns the number of tokens inserted.
        """
        inserted = 0
        for toks in iter_lines(text):
            prev = None
            for w in toks:
                self.lexicon.insert(w)
                inserted += 1
                if not is_dictionary and prev is not None:
                    self.lexicon.record_following(prev, w)
                prev = w
        logger.debug(
            "loaded %d tokens (%s)", inserted, "dictionary" if is_dictionary else "corpus"
        )
        return inserted

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------
    def guess(self, letter: str, letter_position: int, word_index: int) -> List[str]:
        """
        Feed one keystroke and return exactly three suggestions.
        Whitespace ends the word (and forgets the bigram anchor); position 0
        starts a new word; anything else that is not a-z yields fallbacks.
        `word_index` is accepted for callers but does not affect ranking.
        """
        st = self._state
        if is_boundary(letter):
            st.prefix = ""
            st.previous_word = None
            return self._fallbacks()

        if letter_position == 0:
            st.prefix = ""

        if not is_letter(letter):
            return self._fallbacks()

        st.prefix += letter.lower()

        out: List[str] = []
        # bigram anchor first, in table order
        if st.previous_word is not None:
            anchor = self.lexicon.lookup(st.previous_word)
            if anchor is not None:
                for w in anchor.next_words:
                    if w.startswith(st.prefix):
                        out.append(w)

        if len(out) < SUGGESTION_COUNT:
            for w in self.lexicon.prefix_search(st.prefix, SUGGESTION_COUNT - len(out)):
                if w not in out:
                    out.append(w)

        while len(out) < SUGGESTION_COUNT:
            out.append(self.cfg.fallback)
        return out[:SUGGESTION_COUNT]

    def _fallbacks(self) -> List[str]:
        return [self.cfg.fallback] * SUGGESTION_COUNT

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------
    def feedback(self, is_correct_guess: bool, correct_word: Optional[str]) -> None:
        """
        Reinforce `correct_word` and make it the anchor for the next word.
        The boost is the same whether or not the guess was right.
        """
        if not correct_word:
            return
        if not self.lexicon.boost(correct_word, self.cfg.feedback_boost):
            logger.debug("feedback for unknown word %r", correct_word)
        self._state.previous_word = correct_word
        self._state.prefix = ""

    # ------------------------------------------------------------------
    # Session helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        """Snapshot of the session (mutating it does not affect the Predictor)."""
        return replace(self._state)
