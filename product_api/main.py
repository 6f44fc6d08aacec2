# product_api/main.py
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .database import CatalogStore, get_store
from .errors import ApiError, NotFoundError, UnclassifiedError, ValidationError, error_response
from .handlers import (
    WELCOME_MESSAGE,
    create_product_logic,
    delete_product_logic,
    get_product_logic,
    list_products_logic,
    stats_logic,
    update_product_logic,
)
from .middleware import (
    ApiKeyMiddleware,
    ErrorTranslationMiddleware,
    JSONBodyMiddleware,
    RequestLoggingMiddleware,
    json_body,
)
from .models import DeleteResult, PageResult, Product


# ---------------------------
# Exception handlers
# ---------------------------
async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with an unsupported verb look the same
    if exc.status_code in (404, 405):
        return error_response(NotFoundError("Route not found"))
    if exc.status_code == 400:
        return error_response(ValidationError(str(exc.detail)))
    return error_response(UnclassifiedError())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    return error_response(ValidationError(first.get("msg", "Invalid request")))


def create_app(settings: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.store = store if store is not None else CatalogStore.seeded()

    # Added innermost first: logging -> errors -> JSON body -> API key
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key, header_name=settings.api_key_header)
    app.add_middleware(JSONBodyMiddleware)
    app.add_middleware(ErrorTranslationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ---------------------------
    # Root
    # ---------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return WELCOME_MESSAGE

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/api/products", response_model=PageResult)
    async def list_products(
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        store: CatalogStore = Depends(get_store),
    ):
        return list_products_logic(
            store,
            category=category,
            search=search,
            page=page,
            limit=limit,
            default_page=settings.default_page,
            default_limit=settings.default_limit,
        )

    # Registered before /{product_id} so "stats" is not taken as an id
    @app.get("/api/products/stats", response_model=Dict[str, int])
    async def product_stats(store: CatalogStore = Depends(get_store)):
        return stats_logic(store)

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
        return get_product_logic(store, product_id)

    @app.post("/api/products", status_code=201, response_model=Product)
    async def create_product(
        payload: Dict[str, Any] = Depends(json_body),
        store: CatalogStore = Depends(get_store),
    ):
        return create_product_logic(store, payload)

    @app.put("/api/products/{product_id}", response_model=Product)
    async def update_product(
        product_id: str,
        payload: Dict[str, Any] = Depends(json_body),
        store: CatalogStore = Depends(get_store),
    ):
        return update_product_logic(store, product_id, payload)

    @app.delete("/api/products/{product_id}", response_model=DeleteResult)
    async def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
        return delete_product_logic(store, product_id)

    return app


app = create_app()
