import logging
from typing import Optional

from pydantic import ValidationError

from ..conf import AdditionalFeeSettings, get_fee_settings
from ..data_transfer_objects import FEE_FIELD, NONCE_FIELD, ProductFeeUpdateData
from ..interfaces import FeeConfigurationServiceInterface, ProductConfigStore
from ..nonces import SAVE_PRODUCT_ACTION, verify_nonce
from ..stores import ProductFeeConfigStore
from ..utils import parse_percentage

logger = logging.getLogger(__name__)


class FeeConfigurationService(FeeConfigurationServiceInterface):
    def __init__(
        self,
        store: Optional[ProductConfigStore] = None,
        fee_settings: Optional[AdditionalFeeSettings] = None
    ):
        self.fee_settings = fee_settings or get_fee_settings()
        self.store = store or ProductFeeConfigStore(self.fee_settings.meta_key)

    def write_configured_fee(self, product_id: str, raw_value: str) -> bool:
        value = str(raw_value).strip() if raw_value is not None else ""
        percentage = parse_percentage(value)
        if percentage is None:
            logger.info(f"Rejected invalid fee {raw_value!r} for product {product_id}")
            return False
        if percentage < 0 and not self.fee_settings.allow_negative:
            logger.info(f"Rejected negative fee {raw_value!r} for product {product_id}")
            return False

        if not self.store.set(product_id, value):
            logger.warning(f"Could not store fee for product {product_id}")
            return False

        logger.info(f"Stored fee {value}% for product {product_id}")
        return True

    def save_from_request(self, product_id: str, data: dict, user_id: Optional[int] = None) -> bool:
        try:
            update = ProductFeeUpdateData(
                nonce=data.get(NONCE_FIELD),
                raw_value=data.get(FEE_FIELD),
            )
        except ValidationError as e:
            logger.info(f"Rejected fee update for product {product_id}: {e.error_count()} invalid field(s)")
            return False

        if not verify_nonce(update.nonce, SAVE_PRODUCT_ACTION, user_id):
            logger.warning(f"Rejected fee update for product {product_id}: nonce check failed")
            return False

        return self.write_configured_fee(product_id, update.raw_value)
