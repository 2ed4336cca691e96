"""
Vigenère Polyalphabetic Cipher
==============================
Each letter is shifted by the alphabet position of the matching letter
of a repeating keyword: added to encrypt, subtracted to decrypt.

Historical note: Giovan Battista Bellaso, 1553, later credited to
Blaise de Vigenère. Called "le chiffre indéchiffrable" for 300 years.

Key schedule: the keyword is stripped of non-letters, uppercased and
de-duplicated ("KEYKEY" → "KEY"). Only letters consume keyword
positions; digits pass through and leave the keyword where it was.
Because of that positional state the text must be processed as one
piece and is never split across workers.
"""

from ..exceptions import InvalidKey
from ..modes import CipherMode
from .base import ALPHA, Cipher


class VigenereCipher(Cipher):
    """Vigenère cipher with a de-duplicated uppercase keyword."""

    def __init__(self, key: str):
        keyword = ""
        for ch in key.upper():
            if ch in ALPHA and ch not in keyword:
                keyword += ch
        if not keyword:
            raise InvalidKey("Vigenère key must contain at least one letter.")
        self._keyword = keyword
        self._shifts = tuple(ALPHA.index(ch) for ch in keyword)

    @property
    def keyword(self) -> str:
        return self._keyword

    def _keystream(self, length: int) -> list:
        """Shift values for `length` letters, cycling through the keyword."""
        period = len(self._shifts)
        return [self._shifts[i % period] for i in range(length)]

    def transform(self, text: str, mode: CipherMode) -> str:
        sign = 1 if mode is CipherMode.ENCRYPT else -1
        keystream = self._keystream(sum(1 for c in text if c in ALPHA))
        result = []
        k_idx = 0
        for ch in text:
            if ch in ALPHA:
                result.append(ALPHA[(ALPHA.index(ch) + sign * keystream[k_idx]) % 26])
                k_idx += 1
            else:
                result.append(ch)
        return "".join(result)

    def __repr__(self):
        return f"VigenereCipher(keyword={self._keyword!r})"
