# product_api/query.py
from typing import Dict, List, Optional, Sequence

from .core import category_key
from .models import PageResult, Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse a query-string integer, falling back to ``default``.

    Missing, non-numeric, zero and negative values all use the default.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def filter_products(
    products: Sequence[Product],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Product]:
    out = list(products)
    if category:
        wanted = category_key(category)
        out = [p for p in out if category_key(p.category) == wanted]
    if search:
        term = search.lower()
        out = [p for p in out if term in p.name.lower()]
    return out


def query_products(
    products: Sequence[Product],
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> PageResult:
    """Filter by category and name, then cut out one page.

    A page past the end yields empty results, never an error.
    """
    filtered = filter_products(products, category=category, search=search)
    start = (page - 1) * limit
    end = start + limit
    return PageResult(page=page, total=len(filtered), results=filtered[start:end])


def category_counts(products: Sequence[Product]) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for p in products:
        stats[p.category] = stats.get(p.category, 0) + 1
    return stats
