from decimal import Decimal
from django.db import transaction
from typing import Tuple, Optional, Dict
import logging

from apps.common.data_transfer_objects import CalculationContext
from apps.event_hub.services.factory import get_event_bus
from apps.product_management.models import Product
from ..interfaces import CartServiceInterface
from ..models import Cart, CartLineItem, ZERO

logger = logging.getLogger(__name__)

CART_CALCULATE_FEES_EVENT = "cart_calculate_fees"


class CartService(CartServiceInterface):
    def __init__(self, event_bus=None):
        self.event_bus = event_bus or get_event_bus()

    def create_cart(self, session_key: str = "") -> Tuple[bool, str]:
        try:
            cart = Cart.objects.create(session_key=session_key)
            return True, cart.id
        except Exception as e:
            logger.error(f"Error creating cart: {str(e)}")
            return False, str(e)

    def add_product(
        self,
        cart_id: str,
        product_id: str,
        quantity: int = 1,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        if quantity < 0:
            return False, "Quantity cannot be negative"

        try:
            with transaction.atomic():
                cart = Cart.objects.select_for_update().get(id=cart_id)

                if cart.status != Cart.CartStatus.OPEN:
                    return False, "Cart is not open"

                product = Product.objects.get(id=product_id)

                CartLineItem.objects.create(
                    cart=cart,
                    product=product,
                    quantity=quantity,
                    unit_price=product.price
                )

                success, message = self.calculate_totals(cart_id, context)
                if not success:
                    raise ValueError(message)

                return True, "Item added to cart"

        except Cart.DoesNotExist:
            return False, "Cart not found"
        except Product.DoesNotExist:
            return False, "Product not found"
        except Exception as e:
            logger.error(f"Error adding item to cart: {str(e)}")
            return False, str(e)

    def set_shipping(
        self,
        cart_id: str,
        shipping_total: Decimal,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        if shipping_total < 0:
            return False, "Shipping total cannot be negative"

        try:
            with transaction.atomic():
                updated = Cart.objects.filter(id=cart_id).update(shipping_total=shipping_total)
                if not updated:
                    return False, "Cart not found"
                return self.calculate_totals(cart_id, context)
        except Exception as e:
            logger.error(f"Error setting shipping on cart: {str(e)}")
            return False, str(e)

    def calculate_totals(
        self,
        cart_id: str,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        context = context or CalculationContext()
        try:
            with transaction.atomic():
                cart = Cart.objects.select_for_update().get(id=cart_id)

                cart.subtotal = sum(
                    (item.line_total for item in cart.line_items.all()),
                    ZERO
                )
                cart.save(update_fields=["subtotal", "updated_at"])

                # Fees are rebuilt by the listeners on every recalculation
                cart.fees.all().delete()
                self.event_bus.emit_event(CART_CALCULATE_FEES_EVENT, {
                    "cart_id": cart.id,
                    "context": context.model_dump(),
                }, is_async=False)

                cart.total = cart.get_pre_fee_base() + cart.fee_total
                cart.save(update_fields=["total", "updated_at"])

                return True, "Cart totals updated"

        except Cart.DoesNotExist:
            return False, "Cart not found"
        except Exception as e:
            logger.error(f"Error updating cart totals: {str(e)}")
            return False, str(e)

    def get_cart(self, cart_id: str) -> Optional[Dict]:
        cart = Cart.objects.filter(id=cart_id).first()
        if cart is None:
            return None
        return {
            "id": cart.id,
            "status": cart.status,
            "subtotal": cart.subtotal,
            "shipping_total": cart.shipping_total,
            "total": cart.total,
            "line_items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                }
                for item in cart.line_items.all()
            ],
            "fees": [
                {
                    "name": fee.name,
                    "amount": fee.amount,
                    "taxable": fee.taxable,
                    "tax_class": fee.tax_class,
                }
                for fee in cart.fees.all()
            ],
        }
