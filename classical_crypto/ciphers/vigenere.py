"""
Vigenère — Polyalphabetic Shift Cipher
======================================
A Caesar shift that changes at every position: the shift for character
i is the range index of key[i % len(key)]. A key shorter than the text
repeats; a key longer than the text is simply not used past its end.

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years until Kasiski showed the repeating key
period gives it away.

Both the key and the text must lie in the legal range, and the key may
not be empty. Either problem rejects the whole call before any work.
"""

import logging
from typing import List

from ..alphabet import is_in_bounds, range_index, shift_character
from ..result import CipherResult, FailureKind

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Vigenère cipher over the 64-character legal range."""

    def __init__(self, key: str):
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def _build_keystream(self, length: int) -> List[int]:
        """Per-position shifts for a text of `length` characters."""
        key = self._key
        return [range_index(key[i % len(key)]) for i in range(length)]

    def _rejection(self, text: str):
        if not self._key or not is_in_bounds(self._key) or not is_in_bounds(text):
            logger.debug(
                f"Vigenère rejected: text={len(text)} chars key={len(self._key or '')} chars"
            )
            return CipherResult.failed(FailureKind.OUT_OF_RANGE)
        return None

    def encrypt(self, plaintext: str) -> CipherResult:
        """Encrypt plaintext string."""
        rejected = self._rejection(plaintext)
        if rejected is not None:
            return rejected
        keystream = self._build_keystream(len(plaintext))
        return CipherResult.success(
            "".join(shift_character(ch, k) for ch, k in zip(plaintext, keystream))
        )

    def decrypt(self, ciphertext: str) -> CipherResult:
        """Decrypt ciphertext string."""
        rejected = self._rejection(ciphertext)
        if rejected is not None:
            return rejected
        keystream = self._build_keystream(len(ciphertext))
        return CipherResult.success(
            "".join(shift_character(ch, -k) for ch, k in zip(ciphertext, keystream))
        )

    def __repr__(self):
        return f"VigenereCipher(key_length={len(self._key)})"
