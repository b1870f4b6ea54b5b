"""
Results — success / failure values returned by every cipher
===========================================================
A cipher never answers with an error message in place of ciphertext:
any string it could print might also be a legitimate ciphertext. Instead
each operation returns a CipherResult that is either a value or a
FailureKind.

Programming defects still raise (InternalInvariantViolation), they are
not results.
"""

import enum
from dataclasses import dataclass
from typing import Optional


class FailureKind(enum.Enum):
    """Why an operation was rejected."""

    OUT_OF_RANGE         = "out_of_range"          # text/key outside the band, or empty key
    KEY_NOT_PARSEABLE    = "key_not_parseable"     # Caesar shift given as non-integer text
    MALFORMED_CIPHERTEXT = "malformed_ciphertext"  # odd-length Playfair ciphertext


class CipherError(ValueError):
    """Raised by CipherResult.unwrap() for a failed result."""

    def __init__(self, kind: FailureKind):
        super().__init__(f"cipher operation rejected: {kind.value}")
        self.kind = kind


class InternalInvariantViolation(RuntimeError):
    """A character passed bounds validation but is missing from a Playfair matrix."""


@dataclass(frozen=True)
class CipherResult:
    value:   Optional[str] = None
    failure: Optional[FailureKind] = None

    def __post_init__(self):
        if (self.value is None) == (self.failure is None):
            raise ValueError("CipherResult needs exactly one of value or failure.")

    @classmethod
    def success(cls, value: str) -> "CipherResult":
        return cls(value=value)

    @classmethod
    def failed(cls, kind: FailureKind) -> "CipherResult":
        return cls(failure=kind)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> str:
        """Return the transformed text, or raise CipherError if rejected."""
        if self.failure is not None:
            raise CipherError(self.failure)
        return self.value
