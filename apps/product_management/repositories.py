from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple


class ProductMetaRepository(ABC):
    @abstractmethod
    def get(self, product_id: str, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, product_id: str, key: str, value: str) -> bool:
        pass


class DjangoProductMetaRepository(ProductMetaRepository):
    def get(self, product_id: str, key: str) -> Optional[str]:
        from apps.product_management.models import ProductMeta
        return (
            ProductMeta.objects.filter(product_id=product_id, key=key)
            .values_list('value', flat=True)
            .first()
        )

    def set(self, product_id: str, key: str, value: str) -> bool:
        from apps.product_management.models import Product, ProductMeta
        if not Product.objects.filter(id=product_id).exists():
            return False
        ProductMeta.objects.update_or_create(
            product_id=product_id,
            key=key,
            defaults={'value': value}
        )
        return True


class InMemoryProductMetaRepository(ProductMetaRepository):
    def __init__(self, initial: Optional[Dict[Tuple[str, str], str]] = None):
        self._values: Dict[Tuple[str, str], str] = dict(initial or {})

    def get(self, product_id: str, key: str) -> Optional[str]:
        return self._values.get((product_id, key))

    def set(self, product_id: str, key: str, value: str) -> bool:
        self._values[(product_id, key)] = value
        return True
