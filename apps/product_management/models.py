from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.common.fields import Base58UUIDv5Field
from apps.common.mixins import TimeStampMixin


class Product(TimeStampMixin):
    id = Base58UUIDv5Field(primary_key=True)
    name = models.CharField(max_length=255)
    slug = models.SlugField(unique=True)
    sku = models.CharField(max_length=64, blank=True, default="")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))]
    )

    def __str__(self):
        return self.name


class ProductMeta(models.Model):
    """
    Free-form key/value configuration attached to a product.

    Extensions store their per-product settings here as text and parse them
    when reading. Rows go away with their product.
    """
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="meta")
    key = models.CharField(max_length=255, db_index=True)
    value = models.TextField(blank=True, default="")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["product", "key"], name="unique_product_meta_key"),
        ]

    def __str__(self):
        return f"{self.product_id} {self.key}={self.value!r}"
