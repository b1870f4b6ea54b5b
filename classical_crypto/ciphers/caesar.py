"""
Caesar — Additive Shift Cipher
==============================
Every character moves the same number of places along the legal range
(space .. underscore), wrapping around at the end.

Historical note: used by Julius Caesar with a shift of three. With only
64 possible keys it falls to brute force instantly.

Role in the package: the simplest transform, and the building block the
Vigenère cipher repeats per position.
"""

import logging

from ..alphabet import RANGE, is_in_bounds, shift_character
from ..result import CipherResult, FailureKind

logger = logging.getLogger(__name__)


class CaesarCipher:
    """Caesar shift over the 64-character legal range."""

    def __init__(self, shift: int):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise TypeError("Caesar shift must be an integer.")
        self._shift = shift

    @property
    def shift(self) -> int:
        return self._shift

    def _transform(self, text: str, shift: int) -> CipherResult:
        if not is_in_bounds(text):
            logger.debug(f"Caesar rejected: {len(text)} chars, out of range")
            return CipherResult.failed(FailureKind.OUT_OF_RANGE)
        return CipherResult.success("".join(shift_character(ch, shift) for ch in text))

    def encrypt(self, plaintext: str) -> CipherResult:
        """Shift every character forward by the key."""
        return self._transform(plaintext, self._shift % RANGE)

    def decrypt(self, ciphertext: str) -> CipherResult:
        """Shift every character back by the key."""
        return self._transform(ciphertext, -(self._shift % RANGE))

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"
