"""Repository interface for sales storage."""

from typing import Protocol

from salesdemo.models import Sale


class SalesRepository(Protocol):
    """Storage operations required by the sale service."""

    def find_all(self) -> list[Sale]:
        ...

    def save(self, sale: Sale) -> None:
        ...

    def delete_by_id(self, product_id: int) -> None:
        ...

    def count(self) -> int:
        ...
