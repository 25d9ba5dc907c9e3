"""
Authentication primitives

Provides:
- Salted PBKDF2 password hashing
- HS256 JWT creation / verification
- The Identity value threaded through mutation handlers
- FastAPI dependencies resolving the bearer token to an Identity
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import base64
import hashlib
import hmac
import json
import logging
import secrets

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from launchwatch.core.config import settings
from launchwatch.db.session import get_db
from launchwatch.models.user import User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

JWT_ALGORITHM = "HS256"


class TokenError(ValueError):
    """Raised when a bearer token is malformed, forged or expired."""


@dataclass(frozen=True)
class Identity:
    """The authenticated caller. ``email`` is None for guest observers."""
    user_id: int
    email: Optional[str] = None


# ── Password Hashing ──

def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    key = hashlib.pbkdf2_hmac('sha256', password.encode(), salt.encode(), 100000)
    return f"{salt}:{key.hex()}"

def verify_password(stored: Optional[str], provided: str) -> bool:
    if not stored or ":" not in stored:
        return False
    salt, key_hex = stored.split(":", 1)
    key = hashlib.pbkdf2_hmac('sha256', provided.encode(), salt.encode(), 100000)
    return hmac.compare_digest(key.hex(), key_hex)


# ── JWT Token ──

def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()

def _b64decode(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))

def _sign(signing_input: str) -> str:
    digest = hmac.new(settings.JWT_SECRET.encode(), signing_input.encode(), hashlib.sha256).digest()
    return _b64encode(digest)

def create_access_token(user: User, expires_minutes: Optional[int] = None) -> str:
    minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    expires = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {
        "user_id": user.id,
        "email": user.email,
        "exp": int(expires.timestamp()),
    }
    header = _b64encode(json.dumps({"alg": JWT_ALGORITHM, "typ": "JWT"}).encode())
    body = _b64encode(json.dumps(payload).encode())
    return f"{header}.{body}.{_sign(f'{header}.{body}')}"

def decode_access_token(token: str) -> dict:
    parts = token.split(".")
    if len(parts) != 3:
        raise TokenError("Invalid token format")

    header, body, signature = parts
    if not hmac.compare_digest(signature.encode(), _sign(f"{header}.{body}").encode()):
        raise TokenError("Invalid signature")

    try:
        payload = json.loads(_b64decode(body))
    except ValueError as e:
        raise TokenError(f"Invalid payload: {e}") from e
    if not isinstance(payload, dict):
        raise TokenError("Invalid payload")

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        raise TokenError("Missing expiry")
    if datetime.now(timezone.utc).timestamp() > exp:
        raise TokenError("Token expired")
    return payload


# ── Dependencies ──

def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[Identity]:
    """Resolve the bearer token to an Identity, or None if absent/invalid."""
    if not credentials:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except TokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None

    user_id = payload.get("user_id")
    user = db.get(User, user_id) if isinstance(user_id, int) else None
    if user is None:
        return None
    return Identity(user_id=user.id, email=user.email)


def require_identity(identity: Optional[Identity] = Depends(get_optional_identity)) -> Identity:
    if identity is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return identity
