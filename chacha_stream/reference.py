"""
REFERENCE ChaCha20  (cryptography / OpenSSL backend)
=====================================================
An independent, trusted ChaCha20 used to cross-check the pure-Python
pipeline. Nothing here shares code with the layers package.

cryptography's ChaCha20 takes a 16-byte "nonce" that is really
counter(4, little-endian) || nonce(12), the RFC 8439 layout of state
words 12..15. Starting mid-block is done by discarding `offset` bytes
of keystream before the payload.

OpenSSL carries counter overflow into the nonce words instead of
wrapping, so results differ from ChaCha20 only once the block counter
passes 2**32 - 1.

Dependencies: cryptography >= 41.0
"""

import struct
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .errors import InvalidKeyLength, InvalidNonceLength


class ReferenceChaCha20:
    """ChaCha20 keystream via cryptography's OpenSSL binding."""

    KEY_SIZE   = 32
    NONCE_SIZE = 12

    def __init__(self, key: bytes, nonce: bytes):
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLength(f"ChaCha20 key must be {self.KEY_SIZE} bytes.")
        if len(nonce) != self.NONCE_SIZE:
            raise InvalidNonceLength(f"ChaCha20 nonce must be {self.NONCE_SIZE} bytes.")
        self._key   = bytes(key)
        self._nonce = bytes(nonce)

    def crypt(self, data: bytes, seek: int = 0) -> bytes:
        """XOR `data` with the keystream starting at byte index `seek`."""
        block, offset = divmod(seek, 64)
        iv  = struct.pack('<I', block) + self._nonce
        enc = Cipher(algorithms.ChaCha20(self._key, iv), mode=None).encryptor()
        enc.update(bytes(offset))
        return enc.update(bytes(data)) + enc.finalize()

    def keystream(self, length: int, seek: int = 0) -> bytes:
        return self.crypt(bytes(length), seek)
