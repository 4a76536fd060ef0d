"""
Layer 2 — MIXING ENGINE
========================
The ChaCha20 permutation: quarter round, double round, and the 20-round
block function with feed-forward (RFC 8439 §2.1 – §2.3).

All arithmetic is on unsigned 32-bit words. Python ints never overflow,
so every addition and shift is truncated explicitly with MASK32.
"""

from .layer1_state import MASK32

ROUNDS = 20

# Column rounds first, then diagonal rounds. Order matters.
ROUND_INDICES = (
    (0, 4,  8, 12),
    (1, 5,  9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7,  8, 13),
    (3, 4,  9, 14),
)


def add32(x: int, y: int) -> int:
    return (x + y) & MASK32


def rotl32(value: int, count: int) -> int:
    return ((value << count) & MASK32) | (value >> (32 - count))


def quarter_round(state: list, a: int, b: int, c: int, d: int) -> None:
    """ARX mix of four state words, in place."""
    # a += b; d ^= a; d <<<= 16;
    state[a] = add32(state[a], state[b])
    state[d] = rotl32(state[d] ^ state[a], 16)

    # c += d; b ^= c; b <<<= 12;
    state[c] = add32(state[c], state[d])
    state[b] = rotl32(state[b] ^ state[c], 12)

    # a += b; d ^= a; d <<<= 8;
    state[a] = add32(state[a], state[b])
    state[d] = rotl32(state[d] ^ state[a], 8)

    # c += d; b ^= c; b <<<= 7;
    state[c] = add32(state[c], state[d])
    state[b] = rotl32(state[b] ^ state[c], 7)


def double_round(state: list) -> None:
    for a, b, c, d in ROUND_INDICES:
        quarter_round(state, a, b, c, d)


def chacha_block(state: list) -> list:
    """
    Run the block function over `state` in place and return it.

    Ten double rounds, then the saved input words are added back
    word-by-word. Without that feed-forward the output would be an
    invertible permutation of the input.
    """
    initial = state[:]
    for _ in range(ROUNDS // 2):
        double_round(state)
    for i, word in enumerate(initial):
        state[i] = add32(state[i], word)
    return state
