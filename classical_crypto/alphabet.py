"""
Alphabet — Legal Character Range and Bounds Validation
=======================================================
Every cipher in the package works over the same contiguous band of
character codes: space (32) through underscore (95). That is 64 values,
which is exactly enough to fill an 8x8 Playfair matrix.

    LOWER_RANGE  ' '   (32)
    UPPER_RANGE  '_'   (95)
    RANGE         64

Lowercase letters, braces, tilde and anything beyond are out of bounds.
Callers are expected to upper-case their input themselves.

ALPHABET64 lists the same 64 characters in a fixed, human-friendly order
(letters, digits, then punctuation). It only decides the fill order of
the Playfair matrix, so it must never change.
"""

LOWER_RANGE = " "
UPPER_RANGE = "_"
RANGE       = ord(UPPER_RANGE) - ord(LOWER_RANGE) + 1   # 64

ALPHABET64  = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 !\"#$%&'()*+,-./:;<=>?@[\\]^_"

MATRIX_SIZE = 8   # 8 x 8 = 64 cells


def is_in_bounds(text: str) -> bool:
    """True if every character of `text` lies in [LOWER_RANGE, UPPER_RANGE]."""
    return all(LOWER_RANGE <= ch <= UPPER_RANGE for ch in text)


def range_index(ch: str) -> int:
    """Zero-based position of `ch` within the legal range."""
    return ord(ch) - ord(LOWER_RANGE)


def shift_character(ch: str, shift: int) -> str:
    """
    Shift one in-bounds character by `shift` positions, wrapping around
    the legal range. Positive shifts encrypt, negative shifts decrypt.

    Example: (10 - 7 + 64) % 64 == 3
    """
    shifted = (range_index(ch) + (shift % RANGE) + RANGE) % RANGE
    return chr(shifted + ord(LOWER_RANGE))
