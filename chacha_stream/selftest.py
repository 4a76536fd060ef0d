"""
SELF-TEST  |  RFC 8439 known-answer vectors
============================================
Run with:  python -m chacha_stream

Checks each layer against the published RFC 8439 vectors, then compares
the full cipher with the cryptography-backed reference on random input.
"""

import os
import logging
import time

from .cipher import ChaCha20
from .reference import ReferenceChaCha20
from .layers.layer1_state import prepare_state
from .layers.layer2_rounds import chacha_block, quarter_round

logger = logging.getLogger(__name__)

RFC_KEY   = bytes(range(32))
RFC_NONCE = bytes.fromhex("000000000000004a00000000")
SUNSCREEN = (b"Ladies and Gentlemen of the class of '99: If I could offer you "
             b"only one tip for the future, sunscreen would be it.")
SUNSCREEN_CT = bytes.fromhex(
    "6e2e359a2568f98041ba0728dd0d6981e97e7aec1d4360c20a27afccfd9fae0b"
    "f91b65c5524733ab8f593dabcd62b3571639d624e65152ab8f530c359f0861d8"
    "07ca0dbf500d6a6156a38e088a22b65e52bc514d16ccf806818ce91ab7793736"
    "5af90bbf74a35be6b40b8eedf2785e42874d"
)


def _expect(condition, message: str) -> None:
    """Fail a check with AssertionError, even when Python runs with -O."""
    if not condition:
        raise AssertionError(message)


def _check_quarter_round():
    state = [0x11111111, 0x01020304, 0x9b8d6f43, 0x01234567] * 4
    quarter_round(state, 0, 1, 2, 3)
    _expect(state[:4] == [0xea2a92f4, 0xcb1cf8ce, 0x4581472e, 0x5881c4bb],
            "quarter round mismatch")


def _check_block_function():
    nonce = bytes.fromhex("000000090000004a00000000")
    state = chacha_block(prepare_state(RFC_KEY, nonce, 1))
    _expect(state[0] == 0xe4e7f110, f"block word 0 = {state[0]:#010x}")


def _check_encryption():
    ct = bytes(ChaCha20(RFC_KEY, RFC_NONCE, 64).apply_keystream(bytearray(SUNSCREEN)))
    _expect(ct == SUNSCREEN_CT, "RFC 8439 §2.4.2 ciphertext mismatch")
    pt = bytes(ChaCha20(RFC_KEY, RFC_NONCE, 64).apply_keystream(bytearray(ct)))
    _expect(pt == SUNSCREEN, "decryption did not restore plaintext")


def _check_reference(rounds: int = 20):
    for _ in range(rounds):
        key, nonce = ChaCha20.generate_key(), ChaCha20.generate_nonce()
        seek = int.from_bytes(os.urandom(2), 'little')
        msg  = os.urandom(129)
        ours = bytes(ChaCha20(key, nonce, seek).apply_keystream(bytearray(msg)))
        _expect(ours == ReferenceChaCha20(key, nonce).crypt(msg, seek),
                f"reference mismatch at seek={seek}")


CHECKS = [
    ("Quarter round      RFC 8439 §2.1.1", _check_quarter_round),
    ("Block function     RFC 8439 §2.3.2", _check_block_function),
    ("Encryption         RFC 8439 §2.4.2", _check_encryption),
    ("Reference cross-check (cryptography)", _check_reference),
]


def run_tests() -> bool:
    """Run every check, log a line per result, return True if all passed."""
    logger.info("=" * 70)
    logger.info("  chacha_stream  |  Self-Test")
    logger.info("=" * 70)
    failed = 0
    for name, check in CHECKS:
        t0 = time.perf_counter()
        try:
            check()
        except AssertionError as exc:
            logger.error(f"  [FAIL] {name:<40} {exc}")
            failed += 1
            continue
        logger.info(f"  [OK]   {name:<40} {time.perf_counter() - t0:.3f}s")
    logger.info("=" * 70)
    logger.info(f"  {len(CHECKS) - failed} passed  |  {failed} failed")
    logger.info("=" * 70)
    return failed == 0
