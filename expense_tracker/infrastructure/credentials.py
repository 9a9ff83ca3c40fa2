"""Credentials — password hashing and bearer-token minting/verification.

Invariants:
    - Plain passwords never leave this module except as a bcrypt hash
    - Tokens carry the user's email in "sub" and an absolute "exp"
    - decode_access_token raises AuthenticationError for every kind of bad token

Design Decisions:
    - passlib CryptContext with bcrypt: hash format and verification in one place,
      deprecated="auto" lets the scheme be rotated later
    - python-jose HS256: stateless tokens, nothing to store server-side
"""

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from expense_tracker.config import Settings
from expense_tracker.core.errors import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(email: str, settings: Settings) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.access_token_expire_minutes,
    )
    return jwt.encode(
        {"sub": email, "exp": expire},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str, settings: Settings) -> str:
    """Return the email the token was issued for."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError:
        raise AuthenticationError()
    email = payload.get("sub")
    if not isinstance(email, str) or not email:
        raise AuthenticationError()
    return email
