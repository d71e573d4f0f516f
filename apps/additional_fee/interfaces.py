from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Optional, Protocol, Sequence


class ProductConfigStore(ABC):
    """Per-product fee percentage, stored as text."""

    @abstractmethod
    def get(self, product_id: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, product_id: str, value: str) -> bool:
        pass


class CartLine(Protocol):
    product_id: str


class CartAggregate(Protocol):
    def get_line_items(self) -> Sequence[CartLine]: ...

    def get_pre_fee_base(self) -> Decimal: ...

    def add_fee(self, name: str, amount: Decimal, taxable: bool = True, tax_class: str = "") -> Any: ...


class FeeAggregatorInterface(ABC):
    @abstractmethod
    def compute_and_apply_fee(self, cart: CartAggregate) -> Optional[Decimal]:
        """
        Sum the fee percentages of the cart's line items and append one fee
        of ``pre-fee base * sum / 100`` to the cart.

        Returns:
            The appended amount, or None when no fee was appended
        """
        pass

    @abstractmethod
    def read_configured_fee(self, product_id: str) -> Decimal:
        """Get the configured percentage for a product, 0 when absent or invalid"""
        pass


class FeeConfigurationServiceInterface(ABC):
    @abstractmethod
    def write_configured_fee(self, product_id: str, raw_value: str) -> bool:
        """Validate and store a product's fee percentage"""
        pass

    @abstractmethod
    def save_from_request(self, product_id: str, data: dict, user_id: Optional[int] = None) -> bool:
        """
        Store the fee percentage submitted with a product form

        Args:
            product_id: The product being saved
            data: Submitted form fields, must hold the nonce and the fee value
            user_id: The user submitting the form, the nonce is bound to it

        Returns:
            True when the value was persisted
        """
        pass
