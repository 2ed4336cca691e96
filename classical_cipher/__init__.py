"""
classical_cipher — MPAGS classical cipher tool
==============================================
Encrypt and decrypt alphanumeric text with three classical ciphers.

Pipeline:
    raw text → sanitize() → cipher_factory(type, key) → Cipher
             → run_parallel() (Caesar) or Cipher.transform() → text

Ciphers:
    Caesar    — fixed shift, split across worker threads
    Vigenère  — repeating keyword shift
    Playfair  — digraphs over a keyword-seeded 5×5 grid

Not secure. These ciphers fall to frequency analysis and are here for
teaching and puzzles only.
"""

__version__  = "0.5.0"

from .exceptions           import CipherError, MissingArgument, UnknownArgument, InvalidKey
from .modes                import CipherMode, CipherType
from .sanitize             import sanitize, transform_char
from .ciphers.base         import Cipher
from .ciphers.caesar       import CaesarCipher
from .ciphers.vigenere     import VigenereCipher
from .ciphers.playfair     import PlayfairCipher
from .factory              import cipher_factory
from .parallel             import partition, run_parallel
from .settings             import ProgramSettings, process_command_line

__all__ = [
    "CipherError",
    "MissingArgument",
    "UnknownArgument",
    "InvalidKey",
    "CipherMode",
    "CipherType",
    "sanitize",
    "transform_char",
    "Cipher",
    "CaesarCipher",
    "VigenereCipher",
    "PlayfairCipher",
    "cipher_factory",
    "partition",
    "run_parallel",
    "ProgramSettings",
    "process_command_line",
]
