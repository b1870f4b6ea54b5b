"""
classical_crypto — Classical Text Ciphers
=========================================
Three classical substitution ciphers over a fixed 64-character
alphabet (space through underscore). Educational, not secure.

Ciphers:
    CAESAR    — additive shift over the legal range
    VIGENERE  — per-position shift keyed by a repeating keyword
    PLAYFAIR  — 8x8 digraph substitution built from a keyword

Every operation returns a CipherResult: the transformed text, or a
FailureKind explaining why the input was rejected.

License: Apache 2.0
"""

__version__  = "1.0.0"
__project__  = "classical_crypto"

from .alphabet               import ALPHABET64, LOWER_RANGE, UPPER_RANGE, RANGE, is_in_bounds
from .result                 import CipherResult, FailureKind, CipherError, InternalInvariantViolation
from .ciphers.caesar         import CaesarCipher
from .ciphers.vigenere       import VigenereCipher
from .ciphers.playfair       import PlayfairCipher, PlayfairMatrix
from .manager                import CryptoManager, CipherKind, Operation

__all__ = [
    "ALPHABET64",
    "LOWER_RANGE",
    "UPPER_RANGE",
    "RANGE",
    "is_in_bounds",
    "CipherResult",
    "FailureKind",
    "CipherError",
    "InternalInvariantViolation",
    "CaesarCipher",
    "VigenereCipher",
    "PlayfairCipher",
    "PlayfairMatrix",
    "CryptoManager",
    "CipherKind",
    "Operation",
]
