from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class AdditionalFeeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Additional Admin Fee", min_length=1)
    description: str = "Add an additional administration fee (percentage)"
    meta_key: str = Field(default="additional_admin_fee", pattern=r"^[a-z_]+$")
    append_zero_fee: bool = True
    allow_negative: bool = False
    taxable: bool = True
    tax_class: str = ""
    nonce_max_age: int = Field(default=60 * 60 * 24, gt=0)


def get_fee_settings() -> AdditionalFeeSettings:
    """Read ``settings.ADDITIONAL_FEE``; keys are the upper-case field names."""
    raw: Dict[str, Any] = getattr(settings, "ADDITIONAL_FEE", {}) or {}
    try:
        return AdditionalFeeSettings(**{key.lower(): value for key, value in raw.items()})
    except ValidationError as e:
        raise ImproperlyConfigured(f"Invalid ADDITIONAL_FEE configuration: {e}")
