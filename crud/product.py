# crud/product.py

from typing import List, Optional
from sqlalchemy.orm import Session
import models
import schemas


# --- Main function to get products for the shop page ---
def get_products(db: Session) -> List[models.Product]:
    """
    Get every product listing, ordered by name.
    """
    return db.query(models.Product).order_by(models.Product.name, models.Product.id).all()

def get_product(db: Session, product_id: int) -> Optional[models.Product]:
    return db.query(models.Product).filter(models.Product.id == product_id).first()


# --- Merchant inventory management ---
def create_product(db: Session, product: schemas.ProductCreate) -> models.Product:
    db_product = models.Product(**product.model_dump())
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

def update_product(db: Session, db_product: models.Product, changes: schemas.ProductUpdate) -> models.Product:
    """Writes only the fields present in the request body."""
    for field, value in changes.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(db_product, field, value)
    db.commit()
    db.refresh(db_product)
    return db_product

def delete_product(db: Session, db_product: models.Product) -> None:
    db.delete(db_product)
    db.commit()
