# smart_word/context/tokenizer.py
# splits already-read text into normalized word tokens

from typing import Iterator, List

from .normalizer import normalize_word


def tokenize_line(line: str) -> List[str]:
    """
    Return the normalized tokens of one line.
    Tokens are whitespace separated; anything that normalizes to "" is dropped.
    """
    if not line:
        return []
    out = []
    for t in line.split():
        w = normalize_word(t)
        if w:
            out.append(w)
    return out


def iter_lines(text: str) -> Iterator[List[str]]:
    """Yield the token list of every non-empty line in `text`."""
    if not text:
        return
    for line in text.splitlines():
        toks = tokenize_line(line)
        if toks:
            yield toks
