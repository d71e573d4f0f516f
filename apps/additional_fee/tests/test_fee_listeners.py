import pytest
from decimal import Decimal

from apps.additional_fee.apps import AdditionalFeeConfig
from apps.additional_fee.data_transfer_objects import FEE_FIELD, NONCE_FIELD
from apps.additional_fee.listeners.fee_listeners import apply_additional_fee, save_product_fee
from apps.additional_fee.nonces import SAVE_PRODUCT_ACTION, create_nonce
from apps.commerce.models import Cart, CartFee
from apps.commerce.services.cart_service import CART_CALCULATE_FEES_EVENT, CartService
from apps.common.data_transfer_objects import CalculationContext
from apps.event_hub.services.factory import get_event_bus
from apps.product_management.events import PRODUCT_SAVED_EVENT
from apps.product_management.models import Product, ProductMeta


@pytest.fixture
def product_factory(db):
    def _create(name, price="50.00", fee=None):
        product = Product.objects.create(name=name, slug=name.lower().replace(" ", "-"), price=Decimal(price))
        if fee is not None:
            ProductMeta.objects.create(product=product, key="additional_admin_fee", value=fee)
        return product
    return _create


@pytest.fixture
def cart_service(db):
    return CartService()


@pytest.fixture
def cart(cart_service):
    success, cart_id = cart_service.create_cart()
    assert success
    return Cart.objects.get(id=cart_id)


def test_listeners_registered_on_startup():
    event_bus = get_event_bus()
    assert apply_additional_fee in event_bus.get_listeners(CART_CALCULATE_FEES_EVENT)
    assert save_product_fee in event_bus.get_listeners(PRODUCT_SAVED_EVENT)


def test_listeners_not_registered_without_commerce(mocker):
    import apps.additional_fee
    mocker.patch("apps.additional_fee.apps.apps.is_installed", return_value=False)
    mock_get_event_bus = mocker.patch("apps.event_hub.services.factory.get_event_bus")

    AdditionalFeeConfig("apps.additional_fee", apps.additional_fee).ready()

    mock_get_event_bus.assert_not_called()


@pytest.mark.django_db
class TestCartRecalculation:
    def test_fee_added_to_cart_total(self, cart_service, cart, product_factory):
        product = product_factory("Widget", price="100.00", fee="10")

        success, message = cart_service.add_product(cart.id, product.id)

        assert success, message
        cart.refresh_from_db()
        fee = cart.fees.get()
        assert fee.name == "Additional Admin Fee"
        assert fee.amount == Decimal("10.00")
        assert fee.taxable is True
        assert fee.tax_class == ""
        assert cart.total == Decimal("110.00")

    def test_two_products_with_shipping(self, cart_service, cart, product_factory):
        first = product_factory("First", price="100.00", fee="5")
        second = product_factory("Second", price="80.00", fee="7.5")
        cart_service.add_product(cart.id, first.id)
        cart_service.add_product(cart.id, second.id)

        success, _ = cart_service.set_shipping(cart.id, Decimal("20.00"))

        assert success
        cart.refresh_from_db()
        assert cart.fees.get().amount == Decimal("25.00")
        assert cart.total == Decimal("225.00")

    def test_recalculation_replaces_previous_fee(self, cart_service, cart, product_factory):
        product = product_factory("Widget", price="100.00", fee="10")
        cart_service.add_product(cart.id, product.id)

        cart_service.calculate_totals(cart.id)
        cart_service.calculate_totals(cart.id)

        assert CartFee.objects.filter(cart=cart).count() == 1

    def test_empty_cart_gets_zero_fee(self, cart_service, cart):
        success, _ = cart_service.calculate_totals(cart.id)

        assert success
        assert cart.fees.get().amount == Decimal("0")

    def test_admin_render_skips_fee(self, cart_service, cart, product_factory):
        product = product_factory("Widget", price="100.00", fee="10")
        context = CalculationContext(is_admin_request=True)

        cart_service.add_product(cart.id, product.id, context=context)

        cart.refresh_from_db()
        assert not cart.fees.exists()
        assert cart.total == Decimal("100.00")

    def test_admin_async_update_applies_fee(self, cart_service, cart, product_factory):
        product = product_factory("Widget", price="100.00", fee="10")
        context = CalculationContext(is_admin_request=True, is_async_update=True)

        cart_service.add_product(cart.id, product.id, context=context)

        assert cart.fees.get().amount == Decimal("10.00")

    def test_unknown_cart_is_ignored(self):
        apply_additional_fee({"cart_id": "missing", "context": {}})
        assert not CartFee.objects.exists()


@pytest.mark.django_db
class TestProductSaved:
    def test_fee_saved_with_valid_nonce(self, product_factory):
        product = product_factory("Widget")
        payload = {
            "product_id": product.id,
            "user_id": 3,
            "data": {NONCE_FIELD: create_nonce(SAVE_PRODUCT_ACTION, 3), FEE_FIELD: "12.5"},
        }

        get_event_bus().emit_event(PRODUCT_SAVED_EVENT, payload, is_async=False)

        assert ProductMeta.objects.get(product=product, key="additional_admin_fee").value == "12.5"

    def test_fee_not_saved_without_nonce(self, product_factory):
        product = product_factory("Widget", fee="5")

        save_product_fee({"product_id": product.id, "user_id": 3, "data": {FEE_FIELD: "12.5"}})

        assert ProductMeta.objects.get(product=product, key="additional_admin_fee").value == "5"

    def test_missing_product_id_is_ignored(self):
        save_product_fee({"data": {}})
        assert not ProductMeta.objects.exists()

    def test_fee_removed_with_product(self, product_factory):
        product = product_factory("Widget", fee="5")
        product.delete()
        assert not ProductMeta.objects.exists()


@pytest.mark.django_db
def test_oversized_stored_fee_still_yields_one_fee(product_factory):
    cart_service = CartService()
    _, cart_id = cart_service.create_cart()
    product = product_factory("Widget", price="100.00", fee="1e999999999")

    success, _ = cart_service.add_product(cart_id, product.id)

    assert success
    cart = Cart.objects.get(id=cart_id)
    assert cart.fees.get().amount == Decimal("0")
    assert cart.total == Decimal("100.00")
