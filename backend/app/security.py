"""Password hashing, bearer tokens and one-time secrets."""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.exceptions import InvalidTokenError, TokenExpiredError

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# =============================================================================
# Password Utilities
# =============================================================================

def hash_password(password: str) -> str:
    """Hash a password for storing."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a stored password against a provided password."""
    return pwd_context.verify(plain_password, hashed_password)


# =============================================================================
# JWT Token Utilities
# =============================================================================

def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a JWT access token bound to a user id."""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": subject,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> str:
    """
    Validate a JWT and return the user id it was issued for.
    Raises TokenExpiredError for expired tokens, InvalidTokenError otherwise.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError()
    return subject


# =============================================================================
# One-time Secrets (email verification, password reset)
# =============================================================================

@dataclass(frozen=True)
class OneTimeSecret:
    """Plaintext goes in the email; only the hash and expiry are stored."""
    plaintext: str
    hashed: str
    expires_at: datetime


def hash_one_time_secret(plaintext: str) -> str:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def generate_one_time_secret(lifetime: timedelta) -> OneTimeSecret:
    plaintext = secrets.token_hex(32)
    return OneTimeSecret(
        plaintext=plaintext,
        hashed=hash_one_time_secret(plaintext),
        expires_at=datetime.utcnow() + lifetime,
    )
