# security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JOSEError
from sqlalchemy.orm import Session

import models
from config import settings
from crud import user as crud_user
from database import get_db

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(username: str, expires_minutes: Optional[int] = None) -> str:
    minutes = settings.jwt_expire_minutes if expires_minutes is None else expires_minutes
    payload = {"sub": username, "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes)}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """Returns the username the token was issued to, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JOSEError:
        return None
    return payload.get("sub")


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing bearer token", headers={"WWW-Authenticate": "Bearer"})
    username = decode_access_token(credentials.credentials)
    user = crud_user.get_user_by_username(db, username) if username else None
    if not user:
        raise HTTPException(status_code=401, detail="Invalid or expired token", headers={"WWW-Authenticate": "Bearer"})
    return user


def require_merchant(user: models.User = Depends(get_current_user)) -> models.User:
    if not user.is_merchant:
        raise HTTPException(status_code=403, detail="Merchant account required")
    return user
