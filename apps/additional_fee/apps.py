import logging

from django.apps import AppConfig, apps

logger = logging.getLogger(__name__)

COMMERCE_APP = "apps.commerce"


class AdditionalFeeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.additional_fee"
    verbose_name = "Additional Fee"

    def ready(self) -> None:
        if not apps.is_installed(COMMERCE_APP):
            logger.warning(f"{COMMERCE_APP} is not installed, additional fees are disabled")
            return

        from apps.commerce.services.cart_service import CART_CALCULATE_FEES_EVENT
        from apps.event_hub.services.factory import get_event_bus
        from apps.product_management.events import PRODUCT_SAVED_EVENT
        from .listeners.fee_listeners import apply_additional_fee, save_product_fee

        event_bus = get_event_bus()
        event_bus.register_listener(CART_CALCULATE_FEES_EVENT, apply_additional_fee)
        event_bus.register_listener(PRODUCT_SAVED_EVENT, save_product_fee)
        logger.debug("Additional fee listeners registered")
