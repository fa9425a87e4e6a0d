"""bcrypt password hashing."""
from __future__ import annotations

import bcrypt

from ..errors import HashError

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72
DEFAULT_ROUNDS = 10


def hash_password(plaintext: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plaintext password with a fresh random salt.

    Args:
        plaintext: Password as supplied by the caller
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        bcrypt digest string, e.g. ``$2b$10$...``

    Raises:
        HashError: the input is rejected by bcrypt
    """
    raw = plaintext.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise HashError("Failed to hash password")
    try:
        hashed = bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds))
    except ValueError as e:
        raise HashError("Failed to hash password") from e
    return hashed.decode("utf-8")


def verify_password(plaintext: str, digest: str) -> bool:
    """Check a plaintext against a stored digest; a malformed digest never matches.

    The service never reads digests back. This is for callers and tests that
    need to confirm what was stored.
    """
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        return False
