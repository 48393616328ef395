# jobs/seed_catalog.py

from typing import List, Optional
from sqlalchemy.orm import Session
import models
import schemas
from crud import product as crud_product, user as crud_user
from utils import get_logger

logger = get_logger("seed_catalog")

ORANGE_IMAGE = "https://upload.wikimedia.org/wikipedia/commons/thumb/c/c4/Orange-Fruit-Pieces.jpg/2560px-Orange-Fruit-Pieces.jpg"

DEMO_PRODUCTS: List[dict] = [
    {"name": "Orange", "imageUrl": ORANGE_IMAGE, "description": "Sweet navel oranges.", "type": "Fruit", "price": 99, "quantity": 120, "item": "piece"},
    {"name": "Orange orange", "imageUrl": ORANGE_IMAGE, "description": "Extra large oranges.", "type": "Fruit", "price": 299, "quantity": 40, "item": "piece"},
    {"name": "Brown Rice", "imageUrl": "", "description": "Unpolished rice from Nueva Ecija.", "type": "Grain", "price": 65, "quantity": 300, "item": "kg"},
    {"name": "Carabao Milk", "imageUrl": "", "description": "Fresh carabao milk.", "type": "Dairy", "price": 120, "quantity": 25, "item": "liter"},
    {"name": "Eggplant", "imageUrl": "", "description": "Locally grown talong.", "type": "Vegetable", "price": 80, "quantity": 60, "item": "kg"},
]

def run_seed_catalog(db: Session, merchant_username: Optional[str] = None, merchant_password: Optional[str] = None) -> int:
    """
    Fills an empty products table with the demo catalog and, when credentials
    are given, creates a merchant account. Returns the number of products added.
    """
    logger.info("--- Starting catalog seed ---")

    if merchant_username and merchant_password and not crud_user.get_user_by_username(db, merchant_username):
        crud_user.create_user(db, schemas.UserCreate(username=merchant_username, password=merchant_password, user_type="merchant"))
        logger.info("Created merchant account %s", merchant_username)

    if db.query(models.Product).count():
        logger.info("Products table is not empty; skipping catalog seed.")
        return 0

    for row in DEMO_PRODUCTS:
        crud_product.create_product(db, schemas.ProductCreate(**row))

    logger.info("--- Seeded %d products. ---", len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)

if __name__ == "__main__":
    import os
    from database import SessionLocal, Base, engine

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        run_seed_catalog(db, os.getenv("SEED_MERCHANT_USERNAME"), os.getenv("SEED_MERCHANT_PASSWORD"))
    finally:
        db.close()
