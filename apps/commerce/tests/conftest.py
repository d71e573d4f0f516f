import pytest
from decimal import Decimal

from apps.commerce.services.cart_service import CartService
from apps.product_management.models import Product


@pytest.fixture
def mock_event_bus(mocker):
    return mocker.Mock()


@pytest.fixture
def cart_service(mock_event_bus):
    return CartService(event_bus=mock_event_bus)


@pytest.fixture
def product(db):
    return Product.objects.create(name="Widget", slug="widget", price=Decimal("25.00"))
