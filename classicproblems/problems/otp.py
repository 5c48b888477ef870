"""
Toy one-time pad: a message XORed with a random key of equal length.

The encrypted message and the dummy key together form a key pair; neither
half reveals anything on its own, and XORing them restores the original.
"""

import secrets
from typing import Tuple

import numpy as np

OTPKeyPair = Tuple[bytes, bytes]


def random_key(length: int) -> bytes:
    """Generate length random bytes."""
    if length < 0:
        raise ValueError(f"Key length must be non-negative, got {length}")
    return secrets.token_bytes(length)


def encrypt(original: str) -> OTPKeyPair:
    """
    Encrypt a string with a fresh one-time pad.

    Args:
        original: Message to encrypt; its UTF-8 bytes are padded

    Returns:
        Tuple of (dummy key, encrypted bytes)
    """
    original_bytes = np.frombuffer(original.encode("utf-8"), dtype=np.uint8)
    dummy = random_key(len(original_bytes))
    encrypted = np.bitwise_xor(np.frombuffer(dummy, dtype=np.uint8), original_bytes)
    return dummy, encrypted.tobytes()


def decrypt(key1: bytes, key2: bytes) -> str:
    """
    Recover the original string from a key pair.

    Raises:
        ValueError: If the keys differ in length
        UnicodeDecodeError: If the combined bytes are not valid UTF-8
    """
    if len(key1) != len(key2):
        raise ValueError(f"Key lengths differ: {len(key1)} != {len(key2)}")
    decrypted = np.bitwise_xor(np.frombuffer(key1, dtype=np.uint8),
                               np.frombuffer(key2, dtype=np.uint8))
    return decrypted.tobytes().decode("utf-8")
