"""
CryptoManager — uniform encrypt / decrypt dispatch
==================================================
The single entry point a presentation layer needs: pick a cipher with
a CipherKind tag, an operation with an Operation tag, hand over text and
key, and get a CipherResult back.

Keys arrive the way a form field delivers them. A Caesar shift may be
given as text ("7", "-3"); text that is not an integer yields a
KEY_NOT_PARSEABLE failure instead of an exception.
"""

import enum
import logging
from typing import Union

from .ciphers.caesar   import CaesarCipher
from .ciphers.vigenere import VigenereCipher
from .ciphers.playfair import PlayfairCipher
from .result           import CipherError, CipherResult, FailureKind

logger = logging.getLogger(__name__)

Key = Union[int, str]


class _Tag(enum.Enum):

    @classmethod
    def parse(cls, name: str):
        """Look up a member by its lowercase name, e.g. "playfair"."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} {name!r}. Choose one of: {choices}") from None


class CipherKind(_Tag):
    CAESAR   = "caesar"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"


class Operation(_Tag):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CryptoManager:
    """Dispatch encrypt/decrypt calls to the selected cipher."""

    _CIPHERS = {
        CipherKind.CAESAR:   CaesarCipher,
        CipherKind.VIGENERE: VigenereCipher,
        CipherKind.PLAYFAIR: PlayfairCipher,
    }

    @staticmethod
    def parse_shift(key: Key) -> int:
        """Caesar shift from an int or integer text. Raises CipherError."""
        if isinstance(key, int) and not isinstance(key, bool):
            return key
        try:
            return int(str(key).strip())
        except ValueError:
            raise CipherError(FailureKind.KEY_NOT_PARSEABLE) from None

    def cipher_for(self, kind: CipherKind, key: Key):
        """Build the cipher object for `kind` keyed with `key`."""
        if kind is CipherKind.CAESAR:
            return CaesarCipher(self.parse_shift(key))
        if not isinstance(key, str):
            raise TypeError(f"{kind.value} key must be a string.")
        return self._CIPHERS[kind](key)

    def run(self, kind: CipherKind, operation: Operation, text: str, key: Key) -> CipherResult:
        """Apply `operation` with the cipher selected by `kind`."""
        try:
            cipher = self.cipher_for(kind, key)
        except CipherError as e:
            logger.debug(f"{kind.value} {operation.value} rejected: {e.kind.value}")
            return CipherResult.failed(e.kind)
        if operation is Operation.ENCRYPT:
            return cipher.encrypt(text)
        return cipher.decrypt(text)

    def encrypt(self, kind: CipherKind, text: str, key: Key) -> CipherResult:
        return self.run(kind, Operation.ENCRYPT, text, key)

    def decrypt(self, kind: CipherKind, text: str, key: Key) -> CipherResult:
        return self.run(kind, Operation.DECRYPT, text, key)
