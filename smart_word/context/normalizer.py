# smart_word/context/normalizer.py
import re

_non_letters = re.compile(r"[^a-z]")  # lowercase ascii letters only


def normalize_word(token: str) -> str:
    """Lowercase `token` and drop everything outside a-z ("Don't!" -> "dont")."""
    if not token:
        return ""
    return _non_letters.sub("", token.lower())


def is_letter(ch: str) -> bool:
    """True for a single character that lowercases to a-z."""
    if not ch:
        return False
    low = ch.lower()
    return len(low) == 1 and "a" <= low <= "z"


# no-break spaces and NEL join words, they do not end one
_NOT_BOUNDARY = frozenset("\xa0\u2007\u202f\x85")


def is_boundary(ch: str) -> bool:
    # word boundary keystroke (space, tab, newline...)
    return bool(ch) and ch.isspace() and not any(c in _NOT_BOUNDARY for c in ch)
