# product_api/core.py
import uuid
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError

from .errors import ValidationError
from .models import Product

# Fields a client may set on create/update, by wire name.
PRODUCT_FIELDS = ("name", "description", "price", "category", "inStock")
# Fields that may be set to null by an update.
NULLABLE_FIELDS = ("description",)

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def seed_products() -> List[Product]:
    return [Product.model_validate(p) for p in SEED_PRODUCTS]


def new_product_id() -> str:
    return str(uuid.uuid4())


def _build(data: Dict[str, Any]) -> Product:
    try:
        return Product.model_validate(data)
    except SchemaError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Invalid value for '{field}': {first['msg']}") from e


def _make_product(product_id: str, payload: Dict[str, Any]) -> Product:
    """Build a new product from a create payload.

    Only presence is checked: name, price and category must be truthy.
    """
    name = payload.get("name")
    price = payload.get("price")
    category = payload.get("category")
    if not name or not price or not category:
        raise ValidationError("Name, price, and category are required")

    in_stock = payload.get("inStock")
    return _build({
        "id": product_id,
        "name": name,
        "description": payload.get("description"),
        "price": price,
        "category": category,
        "inStock": True if in_stock is None else in_stock,
    })


def _merge_product(current: Product, payload: Dict[str, Any]) -> Product:
    """Shallow-merge an update payload onto an existing product.

    The id never changes and unknown keys are dropped.
    """
    changes: Dict[str, Any] = {}
    for key in PRODUCT_FIELDS:
        if key not in payload:
            continue
        value = payload[key]
        if value is None and key not in NULLABLE_FIELDS:
            continue
        changes[key] = value

    merged = current.model_dump(by_alias=True)
    merged.update(changes)
    merged["id"] = current.id
    return _build(merged)


def category_key(value: Optional[str]) -> str:
    return (value or "").lower()
