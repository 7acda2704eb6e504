# app/core/security.py
from datetime import timedelta

import jwt
from passlib.context import CryptContext

from filemaster.backend.app.core.config import settings
from filemaster.backend.app.domain.common import utcnow

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class BcryptPasswordHasher:
    def hash(self, raw_password: str) -> str:
        return pwd_context.hash(raw_password)

    def verify(self, raw_password: str, hashed_password: str | None) -> bool:
        # password-less rows (the SKIP_AUTH dev user) never match
        if not hashed_password or pwd_context.identify(hashed_password) is None:
            return False
        return pwd_context.verify(raw_password, hashed_password)


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = utcnow()
    payload = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str | None) -> dict:
    if not token:
        raise jwt.InvalidTokenError("Token is empty")
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
