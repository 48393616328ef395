# routes/customer.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

import models
import schemas
from database import get_db
from crud import product as crud_product
from security import get_current_user

router = APIRouter(
    prefix="/customer",
    tags=["Customer"],
)

@router.get("/getProductListings", response_model=List[schemas.Product])
def get_product_listings(
    db: Session = Depends(get_db),
    user: models.User = Depends(get_current_user),
):
    """
    Get the full product catalog for any signed-in user.
    """
    return crud_product.get_products(db)
