"""Unit tests for the sale service."""

import logging

import pytest

from salesdemo.models import Sale, WriteResult
from salesdemo.repositories.memory import InMemorySalesRepository
from salesdemo.services.sale_service import SaleService


class _BrokenRepository:
    def find_all(self) -> list[Sale]:
        return []

    def save(self, sale: Sale) -> None:
        raise RuntimeError("store unavailable")

    def delete_by_id(self, product_id: int) -> None:
        raise RuntimeError("store unavailable")

    def count(self) -> int:
        return 0


@pytest.fixture
def service() -> SaleService:
    return SaleService(InMemorySalesRepository())


def test_insert_and_list(service: SaleService) -> None:
    result = service.insert_data(Sale(product_id=1, product_name="Widget", price=10))

    assert result == WriteResult.success()
    assert result
    assert service.get_all_sales() == [Sale(product_id=1, product_name="Widget", price=10)]


def test_update_replaces_existing(service: SaleService) -> None:
    service.insert_data(Sale(product_id=1, product_name="A", price=5))
    service.insert_data(Sale(product_id=2, product_name="B", price=7))

    assert service.update_data(Sale(product_id=1, product_name="A2", price=6)).ok

    assert service.get_all_sales() == [
        Sale(product_id=1, product_name="A2", price=6),
        Sale(product_id=2, product_name="B", price=7),
    ]


def test_delete_missing_id_succeeds(service: SaleService) -> None:
    assert service.delete_sale(99).ok


def test_write_failures_become_failed_results(caplog: pytest.LogCaptureFixture) -> None:
    service = SaleService(_BrokenRepository())

    with caplog.at_level(logging.ERROR, logger="salesdemo.services.sale_service"):
        inserted = service.insert_data(Sale(product_id=1, product_name="A", price=5))
        updated = service.update_data(Sale(product_id=1, product_name="A", price=5))
        deleted = service.delete_sale(1)

    for result in (inserted, updated, deleted):
        assert not result
        assert result.reason == "store unavailable"
    assert "insert failed: product_id=1" in caplog.text
    assert "delete failed: product_id=1" in caplog.text
