# services/product_pipeline.py
"""
Filter/sort pipeline behind the shop page.

Every function here is pure: it returns a new list and never reorders or
mutates the list it was given. The host calls derive_product_list whenever
the product list, the filter or the sort changes.
"""
from typing import Any, Iterable, List, Optional, Sequence

import schemas


def _sort_value(product: schemas.Product, key: str) -> Any:
    value = getattr(product, key)
    if isinstance(value, str):
        return value.casefold()
    return value


def apply_filter(products: Iterable[schemas.Product], filter_option: Optional[schemas.FilterState]) -> List[schemas.Product]:
    """Keep products whose name contains filter_option.name, ignoring case."""
    if filter_option is None or not filter_option.name:
        return list(products)
    needle = filter_option.name.casefold()
    return [p for p in products if needle in p.name.casefold()]


def apply_sort(products: Iterable[schemas.Product], sort_option: Optional[schemas.SortState]) -> List[schemas.Product]:
    """
    Order products by a single key.

    Ties keep their incoming order in both directions (sorted() is stable,
    including with reverse=True).
    """
    if sort_option is None:
        return list(products)
    return sorted(
        products,
        key=lambda p: _sort_value(p, sort_option.key),
        reverse=sort_option.descending,
    )


def derive_product_list(
    products: Sequence[schemas.Product],
    filter_option: Optional[schemas.FilterState] = None,
    sort_option: Optional[schemas.SortState] = None,
) -> List[schemas.Product]:
    """Filter first, then sort."""
    return apply_sort(apply_filter(products, filter_option), sort_option)
