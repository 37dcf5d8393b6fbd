"""Password hashing and access-token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ripple.core.settings import settings


def hash_password(password: str, *, iterations: int | None = None) -> str:
    """Return a salted PBKDF2-SHA256 hash in werkzeug's ``method$salt$hash`` format."""
    rounds = iterations or settings.password_hash_iterations
    return generate_password_hash(password, method=f"pbkdf2:sha256:{rounds}")


def verify_password(password: str, encoded: str) -> bool:
    """Check a plaintext password against a value produced by :func:`hash_password`."""
    if encoded.count("$") != 2:
        return False
    try:
        return check_password_hash(encoded, password)
    except ValueError:
        return False


def create_access_token(user_id: int, extra_claims: dict[str, str] | None = None) -> str:
    """Create JWT access token for user authentication."""
    to_encode: dict[str, object] = {"sub": str(user_id)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> int:
    """Return the user id carried by a bearer token.

    Raises:
        ValueError: If the token is malformed, expired or lacks a subject.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise ValueError("Could not validate credentials") from err

    subject = payload.get("sub")
    if subject is None:
        raise ValueError("Could not validate credentials")
    try:
        return int(subject)
    except (TypeError, ValueError) as err:
        raise ValueError("Could not validate credentials") from err
