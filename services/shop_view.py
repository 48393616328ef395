# services/shop_view.py
"""
View state of the customer shop page.

ShopView owns the fetched product list, the name filter, the active sort and
the "added to cart" popup. The cart, the auth session and the backend client
are passed in; nothing is read from module globals. Every mutation of the
filter, the sort or the product list re-derives `filtered_products` through
services.product_pipeline.
"""
import threading
from dataclasses import dataclass
from typing import List, Optional

from pydantic import ValidationError

import schemas
from services.auth_session import AuthSession
from services.cart import Cart
from services.product_pipeline import derive_product_list
from storefront_client import StorefrontClient, StorefrontError
from utils import get_logger

logger = get_logger("shop_view")

SKELETON_COUNT = 12


@dataclass
class PopupState:
    visible: bool = False
    image: str = ""
    title: str = ""


class ShopView:
    def __init__(self, client: StorefrontClient, auth: AuthSession, cart: Cart):
        self.client = client
        self.auth = auth
        self.cart = cart

        self.products: List[schemas.Product] = []
        self.filtered_products: List[schemas.Product] = []
        self.loading = True
        self.filter_option = schemas.FilterState()
        self.sort_option: Optional[schemas.SortState] = None
        self.popup = PopupState()

        self._generation = 0
        self._closed = False
        self._lock = threading.Lock()

    # -------------------- derived state --------------------
    @property
    def active_sort(self) -> Optional[schemas.SortState]:
        return self.sort_option

    @property
    def display_state(self) -> str:
        if self.loading:
            return "loading"
        return "empty" if not self.filtered_products else "products"

    @property
    def skeleton_count(self) -> int:
        return SKELETON_COUNT if self.loading else 0

    def is_active_sort(self, key: str, order: str) -> bool:
        s = self.sort_option
        return s is not None and s.key == key and s.direction.value == order

    def refresh(self) -> List[schemas.Product]:
        self.filtered_products = derive_product_list(self.products, self.filter_option, self.sort_option)
        return self.filtered_products

    # -------------------- fetching --------------------
    def mount(self) -> bool:
        return self.fetch_products()

    def set_token(self, token: Optional[str]) -> bool:
        """Store a new token and refetch. Returns False when the token did not change."""
        if token == self.auth.token:
            return False
        self.auth.token = token
        self.fetch_products()
        return True

    def sign_in(self, username: str, password: str) -> schemas.TokenResponse:
        """Log in through the backend, record the account type and load the catalog for the new token."""
        login = self.client.login(username, password)
        self.auth.user_type = login.user_type
        self.set_token(login.token)
        return login

    def sign_out(self) -> bool:
        if not self.auth.is_authenticated:
            return False
        self.auth.sign_out()
        self.fetch_products()
        return True

    def close(self) -> None:
        """Teardown: responses still in flight are dropped and no further fetch is applied."""
        with self._lock:
            self._closed = True
            self._generation += 1
            self.loading = False

    def fetch_products(self) -> bool:
        """
        One best-effort fetch of the product list.

        Returns True when the response was applied. Failures are logged and
        leave the current list untouched; a response that is no longer the
        latest request is dropped.
        """
        with self._lock:
            if self._closed:
                logger.debug("Shop view is closed; skipping fetch")
                return False
            self._generation += 1
            generation = self._generation
            self.loading = True

        applied = False
        try:
            products = self.client.get_product_listings(self.auth.token)
        except StorefrontError as e:
            logger.error("Error fetching products: %s", e)
        else:
            logger.info("Fetched %d products (request #%d)", len(products), generation)
            applied = self._apply_products(generation, products)
        finally:
            self._finish_loading(generation)
        return applied

    def _apply_products(self, generation: int, products: List[schemas.Product]) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale product response #%d (latest is #%d)", generation, self._generation)
                return False
            self.products = list(products)
            self.refresh()
            return True

    def _finish_loading(self, generation: int) -> None:
        with self._lock:
            if generation == self._generation:
                self.loading = False

    # -------------------- user actions --------------------
    def handle_filter(self, key: str, value: Optional[str]) -> List[schemas.Product]:
        if key not in schemas.FilterState.model_fields:
            raise ValueError(f"Unknown filter field '{key}'")
        try:
            self.filter_option = schemas.FilterState.model_validate({**self.filter_option.model_dump(), key: value or None})
        except ValidationError as e:
            raise ValueError(f"Invalid value for filter field '{key}': {value!r}") from e
        return self.refresh()

    def handle_sort(self, key: str, order: str) -> List[schemas.Product]:
        if key not in schemas.SORT_KEYS:
            raise ValueError(f"Unknown sort key '{key}'")
        self.sort_option = schemas.SortState(key=key, direction=schemas.SortOrder(order))
        return self.refresh()

    def handle_reset(self) -> List[schemas.Product]:
        self.filter_option = schemas.FilterState()
        self.sort_option = None
        return self.refresh()

    def handle_add_to_cart(self, product: schemas.Product) -> None:
        self.cart.add_to_cart(product)
        self.popup = PopupState(visible=True, image=product.image_url, title=product.name)

    def handle_close_popup(self) -> None:
        self.popup.visible = False
