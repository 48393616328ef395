# crud/user.py
from typing import Optional

from sqlalchemy.orm import Session

import models
import schemas


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def create_user(db: Session, user: schemas.UserCreate) -> models.User:
    db_user = models.User(
        username=user.username,
        hashed_password=models.User.hash_password(user.password),
        email=user.email,
        user_type=user.user_type,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def authenticate(db: Session, username: str, password: str) -> Optional[models.User]:
    user = get_user_by_username(db, username)
    if not user or not user.verify_password(password):
        return None
    return user
