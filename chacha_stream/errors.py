"""
Boundary errors raised when caller-supplied key or nonce bytes do not have
the fixed sizes ChaCha20 requires. Both subclass ValueError so callers that
already catch ValueError keep working.
"""


class InvalidKeyLength(ValueError):
    """Key is not exactly 32 bytes."""


class InvalidNonceLength(ValueError):
    """Nonce is not exactly 12 bytes."""
