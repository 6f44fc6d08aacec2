#!/usr/bin/env python
import os

from sdk.pycatalog import CatalogAPIError, CatalogClient


def main():
    c = CatalogClient(base_url=os.environ.get("CATALOG_URL", "http://127.0.0.1:3000"))

    print(c.welcome())

    # -----------------------------
    # Seed data
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics, one per page...")
    print(c.list_products(category="electronics", page=1, limit=1))

    print("\nSearching for 'coffee'...")
    print(c.list_products(search="coffee"))

    # -----------------------------
    # Create / update
    # -----------------------------
    print("\nCreating a product...")
    desk = c.create_product("Desk", 300, "furniture", description="Standing desk")
    print(desk)

    print("\nMarking it out of stock...")
    print(c.update_product(desk["id"], in_stock=False, price=280))

    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the desk...")
    print(c.delete_product(desk["id"]))

    print("\nFetching it again...")
    try:
        c.get_product(desk["id"])
    except CatalogAPIError as e:
        print(f"{e.status_code} {e.error}: {e.message}")

    print("\nUsing a wrong API key...")
    try:
        CatalogClient(base_url=c.base_url, api_key="wrong").list_products()
    except CatalogAPIError as e:
        print(f"{e.status_code} {e.error}: {e.message}")


if __name__ == "__main__":
    main()
