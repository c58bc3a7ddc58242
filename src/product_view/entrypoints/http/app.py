from fastapi import FastAPI

from product_view.entrypoints.http.exception_handlers import register_exception_handlers
from product_view.entrypoints.http.routes.health import router as health_router
from product_view.entrypoints.http.routes.products import router as products_router
from product_view.infra.config import get_settings
from product_view.infra.log_config import configure_logging


def build_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Product View API",
        description="""
        Product catalog API for browsing products under filter, sort and pagination constraints.

        ## Features
        - Full catalog listing for infinite-scroll clients
        - Server-side filtered, price-sorted, paginated queries
        - Category listing

        ## Error Handling
        All errors return structured JSON responses with error codes.
        An empty result is not an error; an unreadable catalog returns 503.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")

    return app


app = build_app()
