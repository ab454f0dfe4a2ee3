"""Credential check: username-or-email plus password in, sanitized user plus session token out."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from parksys.core.config import Settings
from parksys.core.errors import InvalidCredentialsError, ValidationFailedError
from parksys.core.security import (
    DUMMY_PASSWORD_HASH,
    LOGIN_MAX_LEN,
    PASSWORD_MAX_LEN,
    create_access_token,
    verify_password,
)
from parksys.models import User
from parksys.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    access_token: str


def _validate_login_input(identifier: str | None, password: str | None) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise ValidationFailedError("Username or email is required.")
    if len(identifier) > LOGIN_MAX_LEN:
        raise ValidationFailedError("Invalid username length.")
    if not isinstance(password, str) or not password:
        raise ValidationFailedError("Password is required.")
    if len(password) > PASSWORD_MAX_LEN:
        raise ValidationFailedError("Invalid password length.")
    return identifier.strip()


def authenticate(
    session: Session,
    identifier: str | None,
    password: str | None,
    settings: Settings | None = None,
) -> AuthResult:
    """
    Verify credentials and issue an access token.

    Unknown user, deactivated user and wrong password all raise the same
    InvalidCredentialsError so responses cannot be used to enumerate accounts.
    Malformed input raises ValidationFailedError before the database is queried.
    """
    identifier = _validate_login_input(identifier, password)

    user = UserRepository(session).get_by_login(identifier)
    if user is None:
        verify_password(password, DUMMY_PASSWORD_HASH)
        logger.info("Login failed: unknown account")
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash) or not user.is_active:
        logger.info("Login failed for user_id=%s", user.id)
        raise InvalidCredentialsError()

    token = create_access_token(sub=user.id, role=user.role, settings=settings)
    logger.info("Login succeeded for user_id=%s role=%s", user.id, user.role)
    return AuthResult(user=user, access_token=token)
