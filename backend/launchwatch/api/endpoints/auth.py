"""
Account endpoints

Provides:
- Sign up (email + password)
- Sign in (returns JWT access token)
- Guest observer sign-in (anonymous account, no credentials)
- Current profile
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Optional
import logging

from launchwatch.core.config import settings
from launchwatch.core.security import (
    Identity,
    create_access_token,
    hash_password,
    require_identity,
    verify_password,
)
from launchwatch.db.session import get_db
from launchwatch.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Pydantic Models ──

class Credentials(BaseModel):
    email: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user_id: int
    email: Optional[str] = None
    is_anonymous: bool = False


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user),
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user_id=user.id,
        email=user.email,
        is_anonymous=bool(user.is_anonymous),
    )


# ── Endpoints ──

@router.post("/register", response_model=TokenResponse)
def register(req: Credentials, db: Session = Depends(get_db)):
    """Create an account and sign it in."""
    email = req.email.strip().lower()
    if not email or not req.password:
        raise HTTPException(status_code=400, detail="Could not create account")
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=409, detail="Could not create account")

    user = User(email=email, password_hash=hash_password(req.password), is_anonymous=False)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Could not create account")

    logger.info(f"Registered user {user.id}")
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(req: Credentials, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == req.email.strip().lower()).first()
    if not user or not verify_password(user.password_hash, req.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _token_response(user)


@router.post("/anonymous", response_model=TokenResponse)
def sign_in_anonymously(db: Session = Depends(get_db)):
    """Continue as a guest observer."""
    user = User(is_anonymous=True)
    db.add(user)
    db.commit()
    logger.info(f"Guest observer {user.id} signed in")
    return _token_response(user)


@router.get("/me")
def get_profile(identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    user = db.get(User, identity.user_id)
    return {
        "id": user.id,
        "email": user.email,
        "is_anonymous": bool(user.is_anonymous),
        "created_at": str(user.created_at),
    }
