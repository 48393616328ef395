# services/cart.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Union

import schemas
from utils import get_logger, to_money

logger = get_logger("cart")


@dataclass
class CartItem:
    product: schemas.Product
    count: int = 1

    @property
    def line_total(self) -> Decimal:
        return to_money(self.product.price) * self.count


class Cart:
    """
    In-memory shopping cart shared by the pages of one session.
    Adding a product that is already in the cart bumps its count.
    """
    def __init__(self):
        self._items: Dict[Union[int, str], CartItem] = {}

    def add_to_cart(self, product: schemas.Product, count: int = 1) -> CartItem:
        if count < 1:
            raise ValueError("count must be at least 1")
        line = self._items.get(product.id)
        if line:
            line.count += count
        else:
            line = self._items[product.id] = CartItem(product=product, count=count)
        logger.debug("Cart add id=%s name=%s count=%d", product.id, product.name, line.count)
        return line

    def remove_from_cart(self, product_id: Union[int, str]) -> bool:
        removed = self._items.pop(product_id, None) is not None
        if removed:
            logger.debug("Cart remove id=%s", product_id)
        return removed

    def clear(self) -> None:
        self._items.clear()

    @property
    def items(self) -> List[CartItem]:
        return list(self._items.values())

    @property
    def count(self) -> int:
        return sum(line.count for line in self._items.values())

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self._items.values()), Decimal("0.00"))

    def __len__(self) -> int:
        return len(self._items)
