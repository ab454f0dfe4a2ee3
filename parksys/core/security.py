"""Credential handling: bcrypt password hashes and signed session tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from parksys.core.config import Settings, get_settings

BCRYPT_ROUNDS = 12
# bcrypt ignores everything past 72 bytes and newer releases reject it outright.
BCRYPT_MAX_BYTES = 72

# Limits on login input; PASSWORD_MIN_LEN applies only when a password is set.
LOGIN_MAX_LEN = 255
PASSWORD_MAX_LEN = 128
PASSWORD_MIN_LEN = 6


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash suitable for ``users.password_hash``."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """True when ``password`` matches; a malformed stored hash never matches."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("ascii"))
    except (ValueError, TypeError):
        return False


# Verified against when no account matches, so a miss costs the same as a wrong password.
DUMMY_PASSWORD_HASH = hash_password("parksys-dummy-password")


def _signing_key(settings: Settings) -> str:
    return settings.JWT_SECRET.get_secret_value()


def create_access_token(sub: str | int, role: str, settings: Settings | None = None) -> str:
    """
    Issue a session token for user ``sub``.

    Claims: ``sub`` (user id as string), ``role``, ``iat`` and ``exp``
    (JWT_EXPIRE_MINUTES after issue).
    """
    settings = settings or get_settings()
    issued_at = datetime.now(UTC)
    claims: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(claims, _signing_key(settings), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    """Verify signature and expiry and return the claims. Raises jwt.PyJWTError otherwise."""
    settings = settings or get_settings()
    return jwt.decode(
        token,
        _signing_key(settings),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
