"""
Playfair — 8x8 Digraph Substitution Cipher
==========================================
Encrypts two characters (a digraph) at a time using a square matrix
built from a keyword.

Matrix construction:
    1. Distinct characters of the key, in first-occurrence order,
       row-major from (0, 0).
    2. Remaining cells filled from ALPHABET64, in order, skipping
       characters already placed.

The legal range has exactly 64 characters, so the matrix always holds
every one of them exactly once and any in-bounds character can be
located.

Pair rules (encrypt / decrypt):
    Same row     -> columns one step right / left   (mod 8)
    Same column  -> rows one step down / up         (mod 8)
    Rectangle    -> swap the two columns, keep rows (self-inverse)

Padding: odd-length plaintext gets one trailing space. Decryption does
not strip it, since a pad cannot be told apart from a real space.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
The classic 5x5 form merges I/J; the 8x8 form needs no merging.
"""

import logging
from typing import Iterator, Tuple

from ..alphabet import ALPHABET64, MATRIX_SIZE, RANGE, is_in_bounds, range_index
from ..result import CipherResult, FailureKind, InternalInvariantViolation

logger = logging.getLogger(__name__)

PAD = " "


class PlayfairMatrix:
    """Immutable 8x8 Playfair grid with O(1) position lookup."""

    SIZE = MATRIX_SIZE

    def __init__(self, cells: str):
        if len(cells) != self.SIZE * self.SIZE or len(set(cells)) != len(cells):
            raise ValueError(f"Playfair matrix needs {self.SIZE * self.SIZE} distinct cells.")
        self._cells     = cells
        self._positions = {ch: divmod(i, self.SIZE) for i, ch in enumerate(cells)}

    @classmethod
    def build(cls, key: str) -> "PlayfairMatrix":
        """
        Build the matrix for `key`. Same key -> same matrix, always, so
        decryption can rebuild exactly the grid encryption used.
        The key must be non-empty and within the legal range.
        """
        if not key or not is_in_bounds(key):
            raise ValueError("Playfair key must be non-empty and within the legal range.")
        placed = [False] * RANGE   # indexed by position in the legal range
        cells  = []
        for ch in key + ALPHABET64:
            idx = range_index(ch)
            if not placed[idx]:
                placed[idx] = True
                cells.append(ch)
            if len(cells) == cls.SIZE * cls.SIZE:
                break
        logger.debug(f"Playfair matrix built from {len(key)}-char key")
        return cls("".join(cells))

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        n = self.SIZE
        return tuple(tuple(self._cells[r * n:(r + 1) * n]) for r in range(n))

    def at(self, row: int, col: int) -> str:
        n = self.SIZE
        return self._cells[(row % n) * n + (col % n)]

    def locate(self, ch: str) -> Tuple[int, int]:
        """(row, col) of `ch`. Missing characters mean the matrix is broken."""
        try:
            return self._positions[ch]
        except KeyError:
            raise InternalInvariantViolation(
                f"character {ch!r} not present in Playfair matrix"
            ) from None

    def _apply(self, a: str, b: str, step: int) -> str:
        r1, c1 = self.locate(a)
        r2, c2 = self.locate(b)
        if r1 == r2:
            c1, c2 = c1 + step, c2 + step
        elif c1 == c2:
            r1, r2 = r1 + step, r2 + step
        else:
            c1, c2 = c2, c1
        return self.at(r1, c1) + self.at(r2, c2)

    def encode_pair(self, a: str, b: str) -> str:
        return self._apply(a, b, 1)

    def decode_pair(self, a: str, b: str) -> str:
        return self._apply(a, b, self.SIZE - 1)

    def __eq__(self, other):
        if not isinstance(other, PlayfairMatrix):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __str__(self):
        return "\n".join(" ".join(row) for row in self.rows)

    def __repr__(self):
        return f"PlayfairMatrix({self._cells!r})"


def _pairs(text: str) -> Iterator[Tuple[str, str]]:
    for i in range(0, len(text), 2):
        yield text[i], text[i + 1]


class PlayfairCipher:
    """Playfair cipher over an 8x8 matrix of the legal range."""

    def __init__(self, key: str):
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def prepare(text: str) -> str:
        """Pad to even length with a single trailing space."""
        return text + PAD if len(text) % 2 else text

    def _rejection(self, text: str):
        if not self._key or not is_in_bounds(self._key) or not is_in_bounds(text):
            logger.debug(
                f"Playfair rejected: text={len(text)} chars key={len(self._key or '')} chars"
            )
            return CipherResult.failed(FailureKind.OUT_OF_RANGE)
        return None

    def matrix(self) -> PlayfairMatrix:
        return PlayfairMatrix.build(self._key)

    def encrypt(self, plaintext: str) -> CipherResult:
        """Encrypt plaintext, padding odd lengths with one space."""
        rejected = self._rejection(plaintext)
        if rejected is not None:
            return rejected
        matrix = PlayfairMatrix.build(self._key)
        text   = self.prepare(plaintext)
        return CipherResult.success("".join(matrix.encode_pair(a, b) for a, b in _pairs(text)))

    def decrypt(self, ciphertext: str) -> CipherResult:
        """Decrypt ciphertext produced by encrypt(). Padding is kept."""
        rejected = self._rejection(ciphertext)
        if rejected is not None:
            return rejected
        if len(ciphertext) % 2:
            logger.debug(f"Playfair decrypt rejected: odd length {len(ciphertext)}")
            return CipherResult.failed(FailureKind.MALFORMED_CIPHERTEXT)
        matrix = PlayfairMatrix.build(self._key)
        return CipherResult.success("".join(matrix.decode_pair(a, b) for a, b in _pairs(ciphertext)))

    def __repr__(self):
        return f"PlayfairCipher(key_length={len(self._key or '')})"
