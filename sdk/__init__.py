from .pycatalog import CatalogAPIError, CatalogClient

__all__ = ["CatalogAPIError", "CatalogClient"]
