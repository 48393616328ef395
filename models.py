# models.py

from sqlalchemy import Column, Integer, String, DateTime, Text, NUMERIC
from sqlalchemy.sql import func
from passlib.context import CryptContext
from database import Base


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=True)
    user_type = Column(String(20), nullable=False, default="customer")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def verify_password(self, password: str) -> bool:
        return pwd_context.verify(password, self.hashed_password)

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @property
    def is_merchant(self) -> bool:
        return self.user_type == "merchant"

class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    image_url = Column(String(2048), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    type = Column(String(100), nullable=False, index=True)
    price = Column(NUMERIC(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    item = Column(String(50), nullable=False, default="piece")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
