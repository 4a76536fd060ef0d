"""
chacha_stream — ChaCha20 Stream Cipher
======================================
Pure-Python ChaCha20 (RFC 8439, 96-bit nonce) with a seekable keystream
cursor: resume encryption at any byte offset without regenerating the
keystream that came before it.

Layers:
    1  STATE      — 16-word initial state (constants, key, counter, nonce)
    2  ROUNDS     — quarter round / double round / 20-round block function
    3  SERIALIZE  — 16 words -> 64 little-endian keystream bytes
    4  CURSOR     — ChaCha20: apply_keystream / seek / block / get_keystream
    REF           — ReferenceChaCha20, cryptography-backed cross-check

No authentication. This is a raw stream cipher; framing, MACs and nonce
management belong to the protocol that uses it.

Self-test:  python -m chacha_stream
"""

__version__ = "1.0.0"

from .errors                   import InvalidKeyLength, InvalidNonceLength
from .cipher                   import ChaCha20, crypt
from .reference                import ReferenceChaCha20
from .layers.layer1_state      import prepare_state
from .layers.layer2_rounds     import quarter_round, double_round, chacha_block
from .layers.layer3_serialize  import serialize_block, keystream_block

__all__ = [
    "ChaCha20",
    "crypt",
    "ReferenceChaCha20",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "prepare_state",
    "quarter_round",
    "double_round",
    "chacha_block",
    "serialize_block",
    "keystream_block",
]
