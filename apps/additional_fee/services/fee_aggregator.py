import logging
from decimal import Decimal, Overflow, localcontext
from typing import Optional

from ..conf import AdditionalFeeSettings, get_fee_settings
from ..interfaces import CartAggregate, FeeAggregatorInterface, ProductConfigStore
from ..stores import ProductFeeConfigStore
from ..utils import parse_percentage

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


class FeeAggregator(FeeAggregatorInterface):
    def __init__(
        self,
        store: Optional[ProductConfigStore] = None,
        fee_settings: Optional[AdditionalFeeSettings] = None
    ):
        self.fee_settings = fee_settings or get_fee_settings()
        self.store = store or ProductFeeConfigStore(self.fee_settings.meta_key)

    def read_configured_fee(self, product_id: str) -> Decimal:
        stored = self.store.get(product_id)
        percentage = parse_percentage(stored)
        if percentage is None:
            if stored not in (None, ""):
                logger.debug(f"Ignoring invalid fee {stored!r} on product {product_id}")
            return Decimal(0)
        if percentage < 0 and not self.fee_settings.allow_negative:
            logger.debug(f"Ignoring negative fee {stored!r} on product {product_id}")
            return Decimal(0)
        return percentage

    def percentage_sum(self, cart: CartAggregate) -> Decimal:
        # One entry per line item, a product in two lines counts twice
        with localcontext() as ctx:
            ctx.traps[Overflow] = False
            total = sum(
                (self.read_configured_fee(item.product_id) for item in cart.get_line_items()),
                Decimal(0)
            )
        return total if total.is_finite() else Decimal(0)

    def compute_and_apply_fee(self, cart: CartAggregate) -> Optional[Decimal]:
        percentage_sum = self.percentage_sum(cart)
        base = cart.get_pre_fee_base()
        if not isinstance(base, Decimal):
            base = Decimal(str(base))
        with localcontext() as ctx:
            ctx.traps[Overflow] = False
            surcharge = base * (percentage_sum / HUNDRED)
        if not surcharge.is_finite():
            logger.warning(f"Additional fee overflowed for base {base} and {percentage_sum}%, using 0")
            surcharge = Decimal(0)

        if not surcharge and not self.fee_settings.append_zero_fee:
            logger.debug("Skipping zero additional fee")
            return None

        cart.add_fee(
            self.fee_settings.title,
            surcharge,
            taxable=self.fee_settings.taxable,
            tax_class=self.fee_settings.tax_class
        )
        logger.info(f"Applied {self.fee_settings.title} of {surcharge} ({percentage_sum}%)")
        return surcharge
