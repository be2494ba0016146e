"""
smart_word.core

The prediction engine.
Contains:
 - the Lexicon (frequency-ranked prefix trie with bounded bigram tables)
 - the Predictor keystroke/feedback session
 - the SmartWord file facade
"""

from .trie import Lexicon, TrieNode
from .predictor import Predictor, PredictorConfig, SessionState, FALLBACK
from .smart_word import SmartWord

__all__ = [
    "Lexicon",
    "TrieNode",
    "Predictor",
    "PredictorConfig",
    "SessionState",
    "FALLBACK",
    "SmartWord",
]
