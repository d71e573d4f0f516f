from decimal import Decimal
from typing import List

from django.db import models
from django.core.validators import MinValueValidator

from apps.common.fields import Base58UUIDv5Field
from apps.common.mixins import TimeStampMixin
from apps.product_management.models import Product

import logging

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class Cart(TimeStampMixin):
    class CartStatus(models.TextChoices):
        OPEN = "OPEN", "Open"
        CHECKED_OUT = "CHECKED_OUT", "Checked Out"
        ABANDONED = "ABANDONED", "Abandoned"

    id = Base58UUIDv5Field(primary_key=True)
    session_key = models.CharField(max_length=40, blank=True, default="")
    status = models.CharField(max_length=20, choices=CartStatus.choices, default=CartStatus.OPEN)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)
    shipping_total = models.DecimalField(
        max_digits=12, decimal_places=2, default=ZERO, validators=[MinValueValidator(ZERO)]
    )
    total = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)

    def __str__(self):
        return f"Cart {self.id} - {self.get_status_display()}"

    def get_line_items(self) -> List["CartLineItem"]:
        return list(self.line_items.all())

    def get_pre_fee_base(self) -> Decimal:
        return (self.subtotal or ZERO) + (self.shipping_total or ZERO)

    def add_fee(self, name: str, amount: Decimal, taxable: bool = True, tax_class: str = "") -> "CartFee":
        fee = CartFee.objects.create(
            cart=self,
            name=name,
            amount=amount,
            taxable=taxable,
            tax_class=tax_class or ""
        )
        logger.debug(f"Added fee '{name}' of {amount} to cart {self.id}")
        return fee

    @property
    def fee_total(self) -> Decimal:
        return sum((fee.amount for fee in self.fees.all()), ZERO)


class CartLineItem(TimeStampMixin):
    id = Base58UUIDv5Field(primary_key=True)
    cart = models.ForeignKey(Cart, on_delete=models.CASCADE, related_name="line_items")
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="cart_line_items")
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, default=ZERO)

    @property
    def line_total(self) -> Decimal:
        return self.quantity * (self.unit_price or ZERO)

    def __str__(self):
        return f"{self.product} - {self.quantity} x ${self.unit_price:.2f}"


class CartFee(TimeStampMixin):
    id = Base58UUIDv5Field(primary_key=True)
    cart = models.ForeignKey(Cart, on_delete=models.CASCADE, related_name="fees")
    name = models.CharField(max_length=255)
    amount = models.DecimalField(max_digits=16, decimal_places=4)
    taxable = models.BooleanField(default=True)
    tax_class = models.CharField(max_length=64, blank=True, default="")

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.name}: ${self.amount:.2f}"
