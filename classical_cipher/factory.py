"""
CipherFactory
=============
Validate a (cipher type, key text) pair and build the matching cipher.

Each cipher class validates its own key in its constructor and raises
InvalidKey; nothing here catches it. A cipher that comes back from
cipher_factory() is always usable.
"""

import logging

from .ciphers.caesar   import CaesarCipher
from .ciphers.playfair import PlayfairCipher
from .ciphers.vigenere import VigenereCipher
from .ciphers.base     import Cipher
from .modes            import CipherType

logger = logging.getLogger(__name__)

_CIPHERS = {
    CipherType.CAESAR:   CaesarCipher,
    CipherType.PLAYFAIR: PlayfairCipher,
    CipherType.VIGENERE: VigenereCipher,
}


def cipher_factory(cipher_type: CipherType, key: str) -> Cipher:
    """
    Build the cipher for `cipher_type` keyed with `key`.

    Raises:
        InvalidKey : the key is not usable by that cipher
        ValueError : `cipher_type` is not a CipherType
    """
    try:
        cls = _CIPHERS[cipher_type]
    except KeyError:
        raise ValueError(f"Unsupported cipher type: {cipher_type!r}") from None
    cipher = cls(key)
    logger.debug("Constructed %r", cipher)
    return cipher
