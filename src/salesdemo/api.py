"""FastAPI application for the sales CRUD service."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from salesdemo import __version__
from salesdemo.config import LOG_FORMAT, SalesConfig, get_config
from salesdemo.dependencies import (
    build_app_resources,
    get_sale_service,
    get_sales_repository,
)
from salesdemo.models import Sale
from salesdemo.repositories.memory import InMemorySalesRepository
from salesdemo.services.sale_service import SaleService

logger = logging.getLogger(__name__)


def health_check(
    repository: InMemorySalesRepository = Depends(get_sales_repository),
) -> Dict[str, Any]:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "service": "salesdemo",
        "version": __version__,
        "records": repository.count(),
    }


def get_sales(service: SaleService = Depends(get_sale_service)) -> List[Sale]:
    """List all sales records in storage order."""
    return service.get_all_sales()


def add_sales(data: Sale, service: SaleService = Depends(get_sale_service)) -> bool:
    """Insert a record, replacing any record with the same product_id."""
    return service.insert_data(data).ok


def update_sales(data: Sale, service: SaleService = Depends(get_sale_service)) -> bool:
    """Fully replace the record with the same product_id (inserts if absent)."""
    return service.update_data(data).ok


def delete_sale_by_id(
    product_id: int, service: SaleService = Depends(get_sale_service)
) -> bool:
    """Remove every record with the given product_id."""
    return service.delete_sale(product_id).ok


async def rate_limit_exceeded_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Rate limit exceeded handler."""
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded. Please try again later."},
    )


def create_app(config: Optional[SalesConfig] = None) -> FastAPI:
    """Build a FastAPI app whose sales store lives for the app lifespan."""
    app_config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.salesdemo_resources = build_app_resources(app_config)
        logger.info(
            "sales store initialized (lock=%s)", app_config.repository_lock
        )
        try:
            yield
        finally:
            app.state.salesdemo_resources = None
            logger.info("sales store released")

    app = FastAPI(
        title="Sales Service",
        description="In-memory CRUD service for sales records",
        version=__version__,
        lifespan=lifespan,
    )

    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[app_config.rate_limit],
        enabled=app_config.rate_limit_enabled,
        swallow_errors=True,
    )
    limiter.exempt(health_check)
    app.state.limiter = limiter

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_api_route("/health", health_check, methods=["GET"])
    app.add_api_route(
        "/employee", get_sales, methods=["GET"], response_model=List[Sale]
    )
    app.add_api_route("/employee", add_sales, methods=["POST"])
    app.add_api_route("/employee", update_sales, methods=["PUT"])
    app.add_api_route("/employee/{product_id}", delete_sale_by_id, methods=["DELETE"])
    return app


app = create_app()


def main() -> None:
    """Run API server."""
    import uvicorn

    config = get_config()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    uvicorn.run(
        "salesdemo.api:app",
        host=config.api_host,
        port=config.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
