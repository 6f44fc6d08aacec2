# product_api/handlers.py
import logging
from typing import Any, Dict, Optional

from .core import _make_product, new_product_id
from .database import CatalogStore
from .errors import NotFoundError
from .models import DeleteResult, PageResult, Product
from .query import category_counts, parse_positive_int, query_products

logger = logging.getLogger(__name__)

# This file contains the logic behind every product endpoint.

WELCOME_MESSAGE = "Welcome to the Product API! Visit /api/products"


def list_products_logic(
    store: CatalogStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    default_page: int = 1,
    default_limit: int = 5,
) -> PageResult:
    return query_products(
        store.snapshot(),
        category=category,
        search=search,
        page=parse_positive_int(page, default_page),
        limit=parse_positive_int(limit, default_limit),
    )


def get_product_logic(store: CatalogStore, product_id: str) -> Product:
    product = store.find_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def create_product_logic(store: CatalogStore, payload: Dict[str, Any]) -> Product:
    product = _make_product(new_product_id(), payload)
    # ids must stay unique across the catalog
    while store.find_by_id(product.id) is not None:
        product = product.model_copy(update={"id": new_product_id()})
    store.append(product)
    logger.info(f"Created product {product.id} ({product.name})")
    return product


def update_product_logic(store: CatalogStore, product_id: str, payload: Dict[str, Any]) -> Product:
    product = store.update(product_id, payload)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def delete_product_logic(store: CatalogStore, product_id: str) -> DeleteResult:
    product = store.delete(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    logger.info(f"Deleted product {product_id}")
    return DeleteResult(message="Product deleted", product=product)


def stats_logic(store: CatalogStore) -> Dict[str, int]:
    return category_counts(store.snapshot())
