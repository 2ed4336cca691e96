"""
Playfair Digraph Cipher
=======================
Letters are enciphered in pairs using a 5×5 grid seeded from a keyword.

Grid:     keyword letters first (repeats skipped), then the rest of the
          alphabet in order. J is folded into I so 25 letters fit.
Digraphs: J → I, a doubled letter inside a pair is split with the
          filler X, and an odd last letter is padded with X. When the
          letter being split or padded is itself X, Q is used instead
          so no pair ever repeats a letter.
Digits:   not part of the grid. Pairs are formed from the letters
          alone and each digit keeps its place among them, so "H1E"
          enciphers the pair HE and comes out as c1 + "1" + c2.
Rules:    same row     → take the letter to the right (left to decrypt)
          same column  → take the letter below (above to decrypt)
          otherwise    → swap columns, keep rows (rectangle)

Filler letters stay in the decrypted text, so only text that is already
in digraph form (e.g. the output of a previous encryption) round-trips
exactly.
"""

from typing import Dict, List, Tuple

from ..exceptions import InvalidKey
from ..modes import CipherMode
from .base import ALPHA, Cipher

FILLER     = "X"
ALT_FILLER = "Q"
GRID_SIZE  = 5


def _filler_for(ch: str) -> str:
    return ALT_FILLER if ch == FILLER else FILLER


def prepare_text(text: str) -> str:
    """
    Insert fillers so the letters of `text` fall into valid digraphs.

    J becomes I; non-letters are kept where they are and do not take
    part in pairing. Text that is already in digraph form (an even
    number of letters, no pair repeating a letter) comes back unchanged.
    """
    out = []
    pending = None
    for ch in text:
        if ch not in ALPHA:
            out.append(ch)
            continue
        if ch == "J":
            ch = "I"
        if pending is None:
            pending = ch
        elif ch == pending:
            out.append(_filler_for(pending))
        else:
            pending = None
        out.append(ch)
    if pending is not None:
        out.append(_filler_for(pending))
    return "".join(out)


def prepare_digraphs(text: str) -> List[Tuple[str, str]]:
    """Regroup the letters of text into Playfair digraphs."""
    letters = [ch for ch in prepare_text(text) if ch in ALPHA]
    return list(zip(letters[0::2], letters[1::2]))


class PlayfairCipher(Cipher):
    """Playfair cipher over a keyword-seeded 5×5 grid."""

    def __init__(self, key: str):
        keyword = [("I" if ch == "J" else ch) for ch in key.upper() if ch in ALPHA]
        if not keyword:
            raise InvalidKey("Playfair key must contain at least one letter.")

        grid = ""
        for ch in keyword + [c for c in ALPHA if c != "J"]:
            if ch not in grid:
                grid += ch
        self._grid = grid
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: divmod(idx, GRID_SIZE) for idx, ch in enumerate(grid)
        }
        self._letters: Dict[Tuple[int, int], str] = {
            pos: ch for ch, pos in self._positions.items()
        }

    @property
    def grid(self) -> str:
        """The 25 grid letters, row by row."""
        return self._grid

    def rows(self) -> List[str]:
        return [self._grid[r * GRID_SIZE:(r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]

    def _map_pair(self, a: str, b: str, step: int) -> str:
        row_a, col_a = self._positions[a]
        row_b, col_b = self._positions[b]
        if row_a == row_b:
            col_a = (col_a + step) % GRID_SIZE
            col_b = (col_b + step) % GRID_SIZE
        elif col_a == col_b:
            row_a = (row_a + step) % GRID_SIZE
            row_b = (row_b + step) % GRID_SIZE
        else:
            col_a, col_b = col_b, col_a
        return self._letters[(row_a, col_a)] + self._letters[(row_b, col_b)]

    def transform(self, text: str, mode: CipherMode) -> str:
        step = 1 if mode is CipherMode.ENCRYPT else -1
        prepared = prepare_text(text)
        letters = [ch for ch in prepared if ch in ALPHA]
        mapped = iter("".join(
            self._map_pair(a, b, step) for a, b in zip(letters[0::2], letters[1::2])
        ))
        return "".join(next(mapped) if ch in ALPHA else ch for ch in prepared)

    def __repr__(self):
        return f"PlayfairCipher(grid={self._grid!r})"
