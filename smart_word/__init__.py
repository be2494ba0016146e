"""
smart_word

Three-suggestion predictive text: a frequency-ranked prefix trie with
bounded next-word tables, driven one keystroke at a time.
"""

from .core import Lexicon, Predictor, PredictorConfig, SmartWord, FALLBACK

__all__ = ["Lexicon", "Predictor", "PredictorConfig", "SmartWord", "FALLBACK"]

__version__ = "0.1.0"
