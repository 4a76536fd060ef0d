"""
Layer 1 — STATE BUILDER
========================
Assembles the 16-word ChaCha20 input state (RFC 8439 §2.3).

    cccccccc  cccccccc  cccccccc  cccccccc      c = constant
    kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk      k = key
    kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk      b = block counter
    bbbbbbbb  nnnnnnnn  nnnnnnnn  nnnnnnnn      n = nonce

Every byte-to-word conversion is little-endian. Inputs are assumed to be
validated already (32-byte key, 12-byte nonce); see ChaCha20.__init__.
"""

import struct

KEY_SIZE   = 32   # 256-bit key
NONCE_SIZE = 12   # 96-bit IETF nonce
MASK32     = 0xFFFFFFFF

# "expand 32-byte k" as four little-endian words
CONSTANTS = (0x61707865, 0x3320646e, 0x79622d32, 0x6b206574)


def prepare_state(key: bytes, nonce: bytes, counter: int) -> list:
    """Return the initial state for block `counter` as a list of 16 ints."""
    return [
        *CONSTANTS,
        *struct.unpack('<8L', key),
        counter & MASK32,
        *struct.unpack('<3L', nonce),
    ]
