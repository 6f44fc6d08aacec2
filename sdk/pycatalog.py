# sdk/pycatalog.py
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print

DEFAULT_API_KEY = "mysecurekey"


class CatalogAPIError(Exception):
    """An error response from the product API (``{error, message}`` body)."""

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(f"{status_code} {error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message


def _unwrap(r) -> Any:
    if r.status_code >= 400:
        try:
            body = r.json()
        except ValueError:
            body = {}
        raise CatalogAPIError(
            r.status_code,
            body.get("error", "HTTPError"),
            body.get("message", r.text),
        )
    return r.json()


class CatalogClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        api_key: str = DEFAULT_API_KEY,
        timeout: int = 10,
        session=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        # any requests.Session-like object works (tests pass a TestClient)
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _list_params(category, search, page, limit) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        return params

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        if r.status_code >= 400:
            _unwrap(r)
        return r.text

    # Products
    def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ):
        params = self._list_params(category, search, page, limit)
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        return _unwrap(r)

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _unwrap(r)

    def create_product(
        self,
        name: str,
        price: float,
        category: str,
        description: Optional[str] = None,
        in_stock: Optional[bool] = None,
    ):
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        return _unwrap(r)

    def update_product(self, product_id: str, **changes):
        if "in_stock" in changes:
            changes["inStock"] = changes.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=changes, timeout=self.timeout)
        return _unwrap(r)

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _unwrap(r)

    def stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        return _unwrap(r)

    # Async listing (example)
    async def list_products_async(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        params = self._list_params(category, search, page, limit)
        headers = {"x-api-key": self.api_key}
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport) as client:
            r = await client.get(self._url("/api/products"), params=params, headers=headers)
            return _unwrap(r)


if __name__ == "__main__":
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=os.environ.get("CATALOG_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.environ.get("API_KEY", DEFAULT_API_KEY))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--search", help="Match product names containing this text")
    lp.add_argument("--page", type=int, help="Page number (1-indexed)")
    lp.add_argument("--limit", type=int, help="Products per page")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--category", required=True, help="Product category")
    cp.add_argument("--description", help="Product description")
    cp.add_argument("--out-of-stock", action="store_true", help="Mark the product as not in stock")

    up = subparsers.add_parser("update-product", help="Update fields of a product")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--description")
    up.add_argument("--in-stock", choices=["true", "false"])

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("stats", help="Count products per category")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list-products":
            print(c.list_products(args.category, args.search, args.page, args.limit))
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(
                args.name, args.price, args.category, args.description,
                False if args.out_of_stock else None,
            ))
        elif args.command == "update-product":
            changes = {
                k: v for k, v in (
                    ("name", args.name),
                    ("price", args.price),
                    ("category", args.category),
                    ("description", args.description),
                ) if v is not None
            }
            if args.in_stock is not None:
                changes["in_stock"] = args.in_stock == "true"
            print(c.update_product(args.product_id, **changes))
        elif args.command == "delete-product":
            print(c.delete_product(args.product_id))
        elif args.command == "stats":
            print(c.stats())
    except CatalogAPIError as e:
        print(f"[red]{e.error}:[/red] {e.message}")
        raise SystemExit(1)
