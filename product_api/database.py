# product_api/database.py
import threading
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request

from .core import _merge_product, seed_products
from .models import Product

# The catalog lives in process memory only; it is re-seeded for every
# new store and lost when the process exits.


class CatalogStore:
    """Ordered, in-memory product catalog.

    Every read-modify-write sequence (find index + replace/remove) runs
    under one re-entrant lock, so handlers may run on worker threads.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "CatalogStore":
        return cls(seed_products())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def snapshot(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def find_index_by_id(self, product_id: str) -> Optional[int]:
        with self._lock:
            for index, p in enumerate(self._products):
                if p.id == product_id:
                    return index
            return None

    def append(self, product: Product) -> Product:
        with self._lock:
            if self.find_index_by_id(product.id) is not None:
                raise ValueError(f"duplicate product id {product.id!r}")
            self._products.append(product)
            return product

    def replace_at(self, index: int, product: Product) -> Product:
        with self._lock:
            self._products[index] = product
            return product

    def remove_at(self, index: int) -> Product:
        with self._lock:
            return self._products.pop(index)

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        with self._lock:
            index = self.find_index_by_id(product_id)
            if index is None:
                return None
            merged = _merge_product(self._products[index], changes)
            return self.replace_at(index, merged)

    def delete(self, product_id: str) -> Optional[Product]:
        with self._lock:
            index = self.find_index_by_id(product_id)
            if index is None:
                return None
            return self.remove_at(index)


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store
