"""
Layer 3 — KEYSTREAM SERIALIZER
===============================
Turns the 16 post-transform words into 64 keystream bytes, little-endian
per word, word 0 first.

keystream_window() is what the cipher cursor consumes: it generates blocks
`counter` and `counter + 1` and returns the 64 bytes starting at `offset`,
so a cursor sitting mid-block still gets a full block of keystream. When
offset is 0 the second block is simply discarded.
"""

import struct

from .layer1_state import MASK32, prepare_state
from .layer2_rounds import chacha_block

BLOCK_SIZE = 64


def serialize_block(state: list) -> bytes:
    return struct.pack('<16L', *state)


def keystream_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """64 bytes of keystream for a single block counter."""
    return serialize_block(chacha_block(prepare_state(key, nonce, counter)))


def keystream_window(key: bytes, nonce: bytes, counter: int,
                     offset: int) -> bytes:
    """64 bytes of keystream starting at byte `offset` of block `counter`."""
    pair = (keystream_block(key, nonce, counter) +
            keystream_block(key, nonce, (counter + 1) & MASK32))
    return pair[offset:offset + BLOCK_SIZE]
