"""
Caesar Shift Cipher
===================
Every letter moves `shift` places along the alphabet: forward to
encrypt, backward to decrypt. Digits pass through untouched.

The transform is context-free, one character at a time, which is what
allows the text to be split across worker threads (see parallel.py).
"""

import re

from ..exceptions import InvalidKey
from ..modes import CipherMode
from .base import Cipher, shift_letter

# ASCII digits only; int() would also take "3_0" and other scripts' digits
_INTEGER_KEY = re.compile(r"([+-]?)([0-9]+)")


class CaesarCipher(Cipher):
    """Caesar cipher with an integer shift reduced modulo 26."""

    def __init__(self, key: str = ""):
        """
        Build from key text. An empty key is the null key (shift 0);
        any integer of any length is accepted and reduced mod 26, so
        "29" and "-23" both give a shift of 3. Non-numeric text raises
        InvalidKey.
        """
        key = key.strip()
        if not key:
            self._shift = 0
            return
        match = _INTEGER_KEY.fullmatch(key)
        if match is None:
            raise InvalidKey(f"Caesar key must be an integer, got '{key}'")
        sign, digits = match.groups()
        shift = 0
        for d in digits:
            shift = (shift * 10 + int(d)) % 26
        self._shift = -shift % 26 if sign == "-" else shift

    @property
    def shift(self) -> int:
        return self._shift

    def transform(self, text: str, mode: CipherMode) -> str:
        shift = self._shift if mode is CipherMode.ENCRYPT else -self._shift
        return "".join(shift_letter(ch, shift) for ch in text)

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"
