"""
Layer 4 — CURSOR: ChaCha20 Stream Cipher
=========================================
The stateful half of the package. A ChaCha20 instance owns a key, a nonce
and a cursor (block index, intra-block offset) and XORs keystream into
caller buffers starting from wherever the cursor points.

Key:    256-bit (32 bytes)
Nonce:   96-bit (12 bytes) — caller must never reuse one under the same key
Block:  512-bit (64 bytes) of keystream per counter value

Position model:
    absolute byte index = block * 64 + offset,   0 <= offset < 64

The block counter is a 32-bit field and wraps silently after 2**32 - 1,
as RFC 8439 defines it. One (key, nonce) pair therefore yields at most
2**38 bytes (256 GiB) of distinct keystream; rotate the nonce before that.

No authentication: flipping a ciphertext bit flips the same plaintext bit.
Pair this with a MAC (or use an AEAD) at the protocol layer.
"""

import os
import logging
import operator

from .errors import InvalidKeyLength, InvalidNonceLength
from .layers.layer1_state import KEY_SIZE, NONCE_SIZE, MASK32
from .layers.layer3_serialize import BLOCK_SIZE, keystream_window

logger = logging.getLogger(__name__)


def crypt(key: bytes, nonce: bytes, data: bytes, seek: int = 0) -> bytes:
    """Encrypt or decrypt immutable `data` from byte index `seek`."""
    buffer = bytearray(data)
    ChaCha20(key, nonce, seek).apply_keystream(buffer)
    return bytes(buffer)


def _check_index(name: str, value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= MASK32:
        raise ValueError(f"{name} must be in 0..{MASK32}, got {value}.")
    return value


class ChaCha20:
    """ChaCha20 keystream cursor (RFC 8439, 96-bit nonce)."""

    KEY_SIZE   = KEY_SIZE
    NONCE_SIZE = NONCE_SIZE
    BLOCK_SIZE = BLOCK_SIZE

    def __init__(self, key: bytes, nonce: bytes, seek: int = 0):
        """
        Start the keystream at absolute byte index `seek`.

        Raises InvalidKeyLength / InvalidNonceLength for wrongly sized input,
        TypeError if either is not bytes-like.
        """
        self._load(key, nonce)
        self.seek(seek)
        self._log_ready()

    @classmethod
    def new_from_block(cls, key: bytes, nonce: bytes, block: int) -> "ChaCha20":
        """Start the keystream at the first byte of `block`."""
        cipher = cls.__new__(cls)
        cipher._load(key, nonce)
        cipher.block(block)
        cipher._log_ready()
        return cipher

    def _load(self, key: bytes, nonce: bytes) -> None:
        key   = bytes(memoryview(key))
        nonce = bytes(memoryview(nonce))
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLength(
                f"ChaCha20 key must be {self.KEY_SIZE} bytes, got {len(key)}.")
        if len(nonce) != self.NONCE_SIZE:
            raise InvalidNonceLength(
                f"ChaCha20 nonce must be {self.NONCE_SIZE} bytes, got {len(nonce)}.")
        self._key    = key
        self._nonce  = nonce
        self._block  = 0
        self._offset = 0

    def _log_ready(self) -> None:
        logger.info(f"ChaCha20 ready | block={self._block} offset={self._offset}")

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def nonce(self) -> bytes:
        return self._nonce

    @property
    def position(self) -> tuple:
        """(block index, intra-block offset) of the next keystream byte."""
        return self._block, self._offset

    def tell(self) -> int:
        return self._block * self.BLOCK_SIZE + self._offset

    @staticmethod
    def generate_key() -> bytes:
        return os.urandom(KEY_SIZE)

    @staticmethod
    def generate_nonce() -> bytes:
        return os.urandom(NONCE_SIZE)

    def seek(self, index: int) -> None:
        """Move the cursor to absolute keystream byte `index`."""
        index = _check_index("seek index", index)
        self._block, self._offset = divmod(index, self.BLOCK_SIZE)
        logger.debug(f"seek {index} -> block={self._block} offset={self._offset}")

    def block(self, index: int) -> None:
        """Move the cursor to the first byte of block `index`."""
        self._block  = _check_index("block index", index)
        self._offset = 0
        logger.debug(f"block -> {self._block}")

    def get_keystream(self, block: int) -> bytes:
        """
        Return the 64 keystream bytes of `block`.

        The cursor is repositioned to (block, 0) and left there: a following
        apply_keystream() starts with this same block.
        """
        self.block(block)
        return keystream_window(self._key, self._nonce, self._block, 0)

    def apply_keystream(self, buffer):
        """
        XOR keystream into `buffer` in place and return `buffer`.

        `buffer` must be writable (bytearray, writable memoryview, array...).
        Encryption and decryption are the same call.

        Each 64-byte chunk, and a trailing partial chunk, consumes one block
        counter value: the cursor advances one block per chunk while the
        intra-block offset stays put. A partial tail therefore still moves
        the cursor a whole block forward.
        """
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError(
                "apply_keystream needs a writable buffer such as bytearray.")
        view = view.cast('B')

        full, tail = divmod(len(view), self.BLOCK_SIZE)
        for i in range(full):
            self._xor_chunk(view[i * self.BLOCK_SIZE:(i + 1) * self.BLOCK_SIZE])
        if tail:
            self._xor_chunk(view[full * self.BLOCK_SIZE:])

        logger.debug(f"applied {len(view)}B -> block={self._block} offset={self._offset}")
        return buffer

    def _xor_chunk(self, chunk: memoryview) -> None:
        size   = len(chunk)
        stream = keystream_window(self._key, self._nonce, self._block, self._offset)
        mixed  = (int.from_bytes(chunk, 'little') ^
                  int.from_bytes(stream[:size], 'little'))
        chunk[:] = mixed.to_bytes(size, 'little')
        self._block = (self._block + 1) & MASK32

    def __repr__(self):
        return f"ChaCha20(block={self._block}, offset={self._offset})"
