"""
Exceptions raised while parsing the command line and building ciphers.

    MissingArgument  — a flag that needs a value was given without one
    UnknownArgument  — a token (or cipher name) that is not recognised
    InvalidKey       — a key that the selected cipher cannot use

All three share CipherError, so a caller can catch the whole family
or tell the kinds apart.
"""


class CipherError(ValueError):
    """Base class for every error this package raises on bad input."""


class MissingArgument(CipherError):
    """A command-line flag was missing its value."""


class UnknownArgument(CipherError):
    """A command-line token did not match any known option."""


class InvalidKey(CipherError):
    """The key failed validation for the requested cipher."""
