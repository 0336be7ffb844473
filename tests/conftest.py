"""Shared test fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from salesdemo.api import create_app
from salesdemo.config import SalesConfig


@pytest.fixture
def api_test_config() -> SalesConfig:
    """Provide a test-owned API config instance."""
    return SalesConfig(
        _env_file=None,
        allowed_origins="http://localhost:5173",
        rate_limit_enabled=False,
        repository_lock=True,
    )


@pytest.fixture
def api_test_app(api_test_config: SalesConfig) -> Generator[Any, None, None]:
    """Create a fresh FastAPI app bound to the test config."""
    app = create_app(api_test_config)
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def api_test_client(api_test_app: Any) -> Generator[TestClient, None, None]:
    """Create a TestClient that runs the app lifespan."""
    with TestClient(api_test_app) as client:
        yield client
