"""
classical_crypto — Live Demo: Caesar, Vigenère, Playfair
========================================================
Run:  python examples/demo_all_ciphers.py

Encrypts and decrypts one message with every cipher through the
CryptoManager dispatch, prints the Playfair matrix, and shows how a
rejected input comes back as a failure instead of garbled text.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_crypto                   import CryptoManager, CipherKind, Operation, FailureKind
from classical_crypto.ciphers.playfair  import PlayfairMatrix

logger = logging.getLogger(__name__)

LINE = "═" * 70
MSG  = "MONTGOMERY 2025!"

DEMOS = [
    (CipherKind.CAESAR,   "7"),
    (CipherKind.VIGENERE, "MNT132!"),
    (CipherKind.PLAYFAIR, "TEACHER"),
]


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    manager = CryptoManager()

    print(f"\n{LINE}")
    print("  classical_crypto — Caesar / Vigenère / Playfair Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    for kind, key in DEMOS:
        header(f"{kind.name} — key {key!r}")
        t0 = time.perf_counter()
        ct = manager.run(kind, Operation.ENCRYPT, MSG, key).unwrap()
        pt = manager.run(kind, Operation.DECRYPT, ct, key).unwrap()
        elapsed = time.perf_counter() - t0
        ok("Encrypted",  ct)
        ok("Decrypted",  pt)
        ok("Round-trip", f"{elapsed*1000:.3f} ms")
        logger.info(f"  {kind.value}: {len(MSG)} chars in, {len(ct)} chars out")

    header("PLAYFAIR — matrix for 'TEACHER'")
    for row in PlayfairMatrix.build("TEACHER").rows:
        print("     " + " ".join(row))

    header("Rejections")
    bad = manager.encrypt(CipherKind.VIGENERE, "lowercase text", "KEY")
    ok("Lowercase text", bad.failure.value)
    bad = manager.encrypt(CipherKind.CAESAR, MSG, "seven")
    ok("Caesar key 'seven'", bad.failure.value)
    bad = manager.decrypt(CipherKind.PLAYFAIR, "ODD", "TEACHER")
    ok("Odd Playfair ciphertext", bad.failure.value)
    assert bad.failure is FailureKind.MALFORMED_CIPHERTEXT

    print(f"\n{LINE}\n")


if __name__ == "__main__":
    main()
