import pytest
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from apps.additional_fee.conf import AdditionalFeeSettings
from apps.additional_fee.services.fee_aggregator import FeeAggregator
from apps.additional_fee.services.fee_configuration_service import FeeConfigurationService
from apps.additional_fee.stores import ProductFeeConfigStore
from apps.product_management.repositories import InMemoryProductMetaRepository

META_KEY = "additional_admin_fee"


@dataclass
class LineItem:
    product_id: str
    quantity: int = 1


@dataclass
class InMemoryCart:
    line_items: List[LineItem] = field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    shipping_total: Decimal = Decimal("0.00")
    fees: List[dict] = field(default_factory=list)

    def get_line_items(self):
        return list(self.line_items)

    def get_pre_fee_base(self):
        return self.subtotal + self.shipping_total

    def add_fee(self, name, amount, taxable=True, tax_class=""):
        fee = {"name": name, "amount": amount, "taxable": taxable, "tax_class": tax_class}
        self.fees.append(fee)
        return fee


@pytest.fixture
def fee_settings():
    return AdditionalFeeSettings()


@pytest.fixture
def meta_repository():
    return InMemoryProductMetaRepository()


@pytest.fixture
def store(meta_repository):
    return ProductFeeConfigStore(META_KEY, repository=meta_repository)


@pytest.fixture
def configure_fee(meta_repository):
    """Store a raw fee value for a product, bypassing validation."""
    def _configure(product_id, value):
        meta_repository.set(product_id, META_KEY, value)
    return _configure


@pytest.fixture
def aggregator(store, fee_settings):
    return FeeAggregator(store=store, fee_settings=fee_settings)


@pytest.fixture
def configuration_service(store, fee_settings):
    return FeeConfigurationService(store=store, fee_settings=fee_settings)


@pytest.fixture
def make_cart():
    def _make(product_ids=(), subtotal="0.00", shipping_total="0.00"):
        return InMemoryCart(
            line_items=[LineItem(product_id=product_id) for product_id in product_ids],
            subtotal=Decimal(subtotal),
            shipping_total=Decimal(shipping_total),
        )
    return _make
