# routes/auth.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import schemas
from database import get_db
from crud import user as crud_user
from security import create_access_token
from utils import get_logger

logger = get_logger("auth")

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/signup", response_model=schemas.User, status_code=201)
def signup(user: schemas.UserCreate, db: Session = Depends(get_db)):
    if crud_user.get_user_by_username(db, user.username):
        raise HTTPException(status_code=409, detail="A user with this username already exists.")
    try:
        db_user = crud_user.create_user(db, user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="A user with this email already exists.")
    logger.info("New %s account: %s", db_user.user_type, db_user.username)
    return db_user

@router.post("/login", response_model=schemas.TokenResponse)
def login(credentials: schemas.LoginRequest, db: Session = Depends(get_db)):
    user = crud_user.authenticate(db, credentials.username, credentials.password)
    if not user:
        logger.warning("Failed login for %s", credentials.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return {"token": create_access_token(user.username), "user_type": user.user_type}
