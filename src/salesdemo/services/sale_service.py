"""Sale CRUD service."""

import logging

from salesdemo.models import Sale, WriteResult
from salesdemo.repositories.base import SalesRepository

logger = logging.getLogger(__name__)


class SaleService:
    """Pass-through over the repository that reports writes as WriteResult."""

    def __init__(self, repository: SalesRepository) -> None:
        self.repository = repository

    def get_all_sales(self) -> list[Sale]:
        return self.repository.find_all()

    def insert_data(self, sale: Sale) -> WriteResult:
        return self._save(sale, action="insert")

    def update_data(self, sale: Sale) -> WriteResult:
        return self._save(sale, action="update")

    def delete_sale(self, product_id: int) -> WriteResult:
        try:
            self.repository.delete_by_id(product_id)
        except Exception as e:
            logger.exception("delete failed: product_id=%s", product_id)
            return WriteResult.failure(str(e) or type(e).__name__)
        logger.debug("deleted sale: product_id=%s", product_id)
        return WriteResult.success()

    def _save(self, sale: Sale, *, action: str) -> WriteResult:
        try:
            self.repository.save(sale)
        except Exception as e:
            logger.exception("%s failed: product_id=%s", action, sale.product_id)
            return WriteResult.failure(str(e) or type(e).__name__)
        logger.debug("%s sale: product_id=%s", action, sale.product_id)
        return WriteResult.success()
