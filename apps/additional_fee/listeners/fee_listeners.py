import logging
from typing import Any, Dict

from apps.common.data_transfer_objects import CalculationContext
from ..services.fee_aggregator import FeeAggregator
from ..services.fee_configuration_service import FeeConfigurationService

logger = logging.getLogger(__name__)


def apply_additional_fee(payload: Dict[str, Any]) -> None:
    """Add the additional fee to a cart that is being recalculated"""
    from apps.commerce.models import Cart

    context = CalculationContext(**payload.get('context', {}))
    if not context.allows_fee_calculation:
        logger.debug(f"Skipping additional fee for cart {payload.get('cart_id')} during admin render")
        return

    try:
        cart = Cart.objects.get(id=payload['cart_id'])
    except KeyError:
        logger.error("Missing required field 'cart_id' in cart_calculate_fees payload")
        return
    except Cart.DoesNotExist:
        logger.error(f"Cart {payload['cart_id']} not found while applying additional fee")
        return

    FeeAggregator().compute_and_apply_fee(cart)


def save_product_fee(payload: Dict[str, Any]) -> None:
    """Persist the additional fee submitted with a product form"""
    product_id = payload.get('product_id')
    if not product_id:
        logger.error("Missing required field 'product_id' in product_saved payload")
        return

    saved = FeeConfigurationService().save_from_request(
        product_id,
        payload.get('data') or {},
        user_id=payload.get('user_id'),
    )
    if not saved:
        logger.info(f"Additional fee for product {product_id} was not updated")
