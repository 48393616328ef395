# routes/admin.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

import models
import schemas
from database import get_db
from crud import product as crud_product
from security import require_merchant
from utils import get_logger

logger = get_logger("admin")

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={404: {"description": "Not found"}},
)

def _get_or_404(db: Session, product_id: int) -> models.Product:
    db_product = crud_product.get_product(db, product_id=product_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="Product not found")
    return db_product

@router.get("/getProductListings", response_model=List[schemas.Product])
def get_inventory(db: Session = Depends(get_db), merchant: models.User = Depends(require_merchant)):
    return crud_product.get_products(db)

@router.post("/addProduct", response_model=schemas.Product, status_code=201)
def add_product(
    product: schemas.ProductCreate,
    db: Session = Depends(get_db),
    merchant: models.User = Depends(require_merchant),
):
    db_product = crud_product.create_product(db, product)
    logger.info("Product added id=%s name=%s by=%s", db_product.id, db_product.name, merchant.username)
    return db_product

@router.put("/updateProduct/{product_id}", response_model=schemas.Product)
def update_product(
    product_id: int,
    changes: schemas.ProductUpdate,
    db: Session = Depends(get_db),
    merchant: models.User = Depends(require_merchant),
):
    db_product = crud_product.update_product(db, _get_or_404(db, product_id), changes)
    logger.info("Product updated id=%s fields=%s", product_id, list(changes.model_dump(exclude_unset=True)))
    return db_product

@router.delete("/deleteProduct/{product_id}", response_model=schemas.Message)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    merchant: models.User = Depends(require_merchant),
):
    crud_product.delete_product(db, _get_or_404(db, product_id))
    logger.info("Product deleted id=%s by=%s", product_id, merchant.username)
    return {"message": f"Product {product_id} deleted"}
