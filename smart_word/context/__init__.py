# smart_word/context/__init__.py
# text normalization and tokenization used by ingestion and keystroke handling

from .normalizer import normalize_word, is_letter, is_boundary
from .tokenizer import tokenize_line, iter_lines

__all__ = [
    "normalize_word",
    "is_letter",
    "is_boundary",
    "tokenize_line",
    "iter_lines",
]
