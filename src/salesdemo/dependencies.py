"""Shared FastAPI app resource container and provider dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from fastapi import Depends, HTTPException, Request, status

from salesdemo.config import SalesConfig
from salesdemo.repositories.memory import InMemorySalesRepository
from salesdemo.services.sale_service import SaleService


@dataclass
class AppResources:
    """App-scoped resources initialized during FastAPI lifespan."""

    config: SalesConfig
    repository: InMemorySalesRepository


def build_app_resources(config: SalesConfig) -> AppResources:
    """Create the resource container for one application instance."""
    return AppResources(
        config=config,
        repository=InMemorySalesRepository(use_lock=config.repository_lock),
    )


def get_app_resources(request: Request) -> AppResources:
    """Return initialized app resources from state."""
    resources = getattr(request.app.state, "salesdemo_resources", None)
    if resources is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Application resources are not initialized",
        )
    return cast(AppResources, resources)


def get_sales_repository(
    resources: AppResources = Depends(get_app_resources),
) -> InMemorySalesRepository:
    """Get app-scoped sales repository."""
    return resources.repository


def get_sale_service(
    repository: InMemorySalesRepository = Depends(get_sales_repository),
) -> SaleService:
    """Get sale service bound to the app-scoped repository (per-request)."""
    return SaleService(repository)
