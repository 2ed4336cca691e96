"""
CharacterSanitizer
==================
Every character of the raw input is mapped to zero or one characters:

    letter  → its uppercase form
    digit   → unchanged
    other   → dropped (whitespace, punctuation, non-ASCII)

The output therefore only ever holds A-Z and 0-9, and sanitizing a
sanitized text changes nothing.
"""

import string

_LETTERS = frozenset(string.ascii_letters)
_DIGITS  = frozenset(string.digits)


def transform_char(ch: str) -> str:
    """Return the canonical form of one character, or '' to drop it."""
    if ch in _LETTERS:
        return ch.upper()
    if ch in _DIGITS:
        return ch
    return ""


def sanitize(text: str) -> str:
    return "".join(transform_char(ch) for ch in text)
