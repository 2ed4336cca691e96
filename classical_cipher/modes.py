"""Cipher mode and cipher type enumerations."""

from enum import Enum

from .exceptions import UnknownArgument


class CipherMode(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherType(Enum):
    CAESAR   = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"

    @classmethod
    def from_name(cls, name: str) -> "CipherType":
        """Resolve a command-line cipher name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownArgument(f"unknown cipher '{name}'") from None
