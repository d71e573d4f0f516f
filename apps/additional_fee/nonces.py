"""
Short-lived, action-bound form tokens.

A nonce proves that a form submission was rendered for the same user and the
same action. Tokens are signed with ``SECRET_KEY`` and expire after
``ADDITIONAL_FEE["NONCE_MAX_AGE"]`` seconds.
"""
import logging
from typing import Optional

from django.core import signing

from .conf import get_fee_settings

logger = logging.getLogger(__name__)

SAVE_PRODUCT_ACTION = "save_product_data"
NONCE_SALT = "apps.additional_fee.nonce"


def _signer(action: str) -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=f"{NONCE_SALT}.{action}")


def create_nonce(action: str, user_id: Optional[int] = None) -> str:
    return _signer(action).sign(str(user_id or 0))


def verify_nonce(token: str, action: str, user_id: Optional[int] = None) -> bool:
    if not token:
        return False
    try:
        value = _signer(action).unsign(token, max_age=get_fee_settings().nonce_max_age)
    except signing.SignatureExpired:
        logger.info(f"Expired nonce for action {action}")
        return False
    except signing.BadSignature:
        logger.warning(f"Invalid nonce for action {action}")
        return False
    return value == str(user_id or 0)
