"""Hash utilities for minivcs."""

import hashlib
from typing import NewType

Digest = NewType('Digest', str)

HEX_DIGITS = '0123456789abcdef'
DIGEST_LENGTH = 40


def hash_object(data: bytes) -> Digest:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return Digest(hashlib.sha1(data).hexdigest())


def frame(kind: str, payload: bytes) -> bytes:
    """
    Build the framed encoding an object is hashed and stored as.
    
    Format: <kind> <byte-length>\\0<payload>
    """
    return f"{kind} {len(payload)}\0".encode() + payload


def hash_framed(kind: str, payload: bytes) -> Digest:
    """Compute the digest of a kind + payload pair."""
    return hash_object(frame(kind, payload))


def is_hex(value: str) -> bool:
    """Check whether a string only contains lowercase hex digits."""
    return bool(value) and all(c in HEX_DIGITS for c in value)


def is_digest(value: str) -> bool:
    """Check whether a string looks like a full digest."""
    return len(value) == DIGEST_LENGTH and is_hex(value)
