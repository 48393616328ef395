# schemas.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Literal, Union
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

# =========================
# Base model configurations
# =========================

class ORMBase(BaseModel):
    """Base for models mapped to SQLAlchemy objects."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

# ======================================================
# Product listing schemas (wire shape of the storefront)
# ======================================================

class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field("", alias="imageUrl")
    description: str = ""
    type: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    quantity: int = Field(0, ge=0)
    item: str = "piece"

class ProductCreate(ProductBase):
    pass

class ProductUpdate(BaseModel):
    """Partial update; only the fields sent are written."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, alias="imageUrl")
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)
    item: Optional[str] = None

class Product(ProductBase):
    """
    A catalog listing as served by GET /customer/getProductListings.
    The id travels as `_id`; `id` is accepted on input as well.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, frozen=True)

    id: Union[int, str] = Field(..., alias="_id")

# --- View state for the shop page ---

SortKey = Literal["name", "price", "type", "quantity"]
SORT_KEYS = ("name", "price", "type", "quantity")

class SortOrder(str, Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None

class SortState(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: SortKey
    direction: SortOrder = SortOrder.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction is SortOrder.DESCENDING

# --- Auth ---

UserType = Literal["customer", "merchant"]

class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6, max_length=72)
    email: Optional[str] = None
    user_type: UserType = "customer"

    @field_validator("username")
    @classmethod
    def _strip_username(cls, v: str) -> str:
        return v.strip()

class User(ORMBase):
    id: int
    username: str
    email: Optional[str] = None
    user_type: UserType
    created_at: Optional[datetime] = None

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    token: str
    user_type: UserType

class Message(BaseModel):
    message: str
