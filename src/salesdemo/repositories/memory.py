"""In-memory sales repository."""

from __future__ import annotations

import contextlib
import threading
from typing import ContextManager

from salesdemo.models import Sale
from salesdemo.repositories.base import SalesRepository


class InMemorySalesRepository(SalesRepository):
    """Ordered in-memory storage, optionally guarded by a coarse lock."""

    def __init__(self, *, use_lock: bool = True) -> None:
        self._lock = threading.Lock() if use_lock else None
        self._sales: list[Sale] = []

    def _guard(self) -> ContextManager[object]:
        if self._lock is None:
            return contextlib.nullcontext()
        return self._lock

    def reset(self) -> None:
        """Drop all records (used by tests)."""
        with self._guard():
            self._sales = []

    def find_all(self) -> list[Sale]:
        with self._guard():
            return [sale.model_copy() for sale in self._sales]

    def save(self, sale: Sale) -> None:
        """Replace the first record with the same product_id, else append."""
        stored = sale.model_copy()
        with self._guard():
            for idx, existing in enumerate(self._sales):
                if existing.product_id == sale.product_id:
                    self._sales[idx] = stored
                    return
            self._sales.append(stored)

    def delete_by_id(self, product_id: int) -> None:
        with self._guard():
            self._sales = [s for s in self._sales if s.product_id != product_id]

    def count(self) -> int:
        with self._guard():
            return len(self._sales)
