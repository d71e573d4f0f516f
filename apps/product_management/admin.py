import logging

from django.contrib import admin

from apps.event_hub.services.factory import get_event_bus
from .events import PRODUCT_SAVED_EVENT
from .models import Product, ProductMeta

logger = logging.getLogger(__name__)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "sku", "price", "updated_at")
    search_fields = ("name", "sku", "slug")
    prepopulated_fields = {"slug": ("name",)}

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        # Extensions persist their own product fields from the submitted data
        data = {
            key: value for key, value in request.POST.dict().items()
            if key != "csrfmiddlewaretoken"
        }
        get_event_bus().emit_event(PRODUCT_SAVED_EVENT, {
            "product_id": obj.pk,
            "user_id": request.user.pk,
            "data": data,
        }, is_async=False)
        logger.info(f"Product {obj.pk} saved by user {request.user.pk}")


@admin.register(ProductMeta)
class ProductMetaAdmin(admin.ModelAdmin):
    list_display = ("product", "key", "value")
    search_fields = ("product__name", "key")
    list_filter = ("key",)
