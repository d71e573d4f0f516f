from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Tuple, Optional, Dict

from apps.common.data_transfer_objects import CalculationContext


class CartServiceInterface(ABC):
    @abstractmethod
    def create_cart(self, session_key: str = "") -> Tuple[bool, str]:
        """
        Open a new cart

        Returns:
            Tuple of (success: bool, cart_id or error message: str)
        """
        pass

    @abstractmethod
    def add_product(
        self,
        cart_id: str,
        product_id: str,
        quantity: int = 1,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        """
        Add a product to the cart at its current price and recalculate totals

        Args:
            cart_id: The cart identifier
            product_id: The product to add
            quantity: Number of units (default is 1)
            context: Where the request came from, used to decide whether fees apply

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass

    @abstractmethod
    def set_shipping(
        self,
        cart_id: str,
        shipping_total: Decimal,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        """Set the shipping total and recalculate the cart"""
        pass

    @abstractmethod
    def calculate_totals(
        self,
        cart_id: str,
        context: Optional[CalculationContext] = None
    ) -> Tuple[bool, str]:
        """Recalculate subtotal, fees and total. Fees are rebuilt from scratch on every call."""
        pass

    @abstractmethod
    def get_cart(self, cart_id: str) -> Optional[Dict]:
        """Get a snapshot of the cart with its line items and fees"""
        pass
