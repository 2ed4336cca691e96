"""
Cipher capability contract
==========================
Each classical cipher exposes exactly one operation:

    transform(text, mode) -> text

Instances hold only validated, normalised key material that is set in
the constructor and never changed afterwards, so one instance can be
shared read-only between threads.
"""

from abc import ABC, abstractmethod

from ..modes import CipherMode

ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Cipher(ABC):
    """A classical substitution cipher with a fixed key."""

    @abstractmethod
    def transform(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt sanitized text (A-Z and 0-9 only)."""


def shift_letter(ch: str, shift: int) -> str:
    """Rotate one uppercase letter by `shift` places; anything else is returned as-is."""
    if ch not in ALPHA:
        return ch
    return ALPHA[(ALPHA.index(ch) + shift) % 26]
