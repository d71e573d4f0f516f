import logging
from typing import Optional

from apps.product_management.repositories import ProductMetaRepository, DjangoProductMetaRepository
from .interfaces import ProductConfigStore

logger = logging.getLogger(__name__)


class ProductFeeConfigStore(ProductConfigStore):
    """Fee percentages kept in product meta under a single key."""

    def __init__(self, meta_key: str, repository: Optional[ProductMetaRepository] = None):
        self.meta_key = meta_key
        self.repository = repository or DjangoProductMetaRepository()

    def get(self, product_id: str) -> Optional[str]:
        try:
            return self.repository.get(product_id, self.meta_key)
        except Exception as e:
            logger.error(f"Error reading {self.meta_key} for product {product_id}: {str(e)}")
            return None

    def set(self, product_id: str, value: str) -> bool:
        try:
            return self.repository.set(product_id, self.meta_key, value)
        except Exception as e:
            logger.error(f"Error writing {self.meta_key} for product {product_id}: {str(e)}")
            return False
