from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import parse_percentage

FEE_FIELD = "additional_admin_fee"
NONCE_FIELD = "additional_fee_nonce"


class ProductFeeUpdateData(BaseModel):
    """Fee fields submitted with a product form."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra='ignore')

    nonce: str = Field(alias=NONCE_FIELD, min_length=1)
    raw_value: str = Field(alias=FEE_FIELD, min_length=1)

    @field_validator('raw_value')
    @classmethod
    def validate_numeric(cls, v):
        if parse_percentage(v) is None:
            raise ValueError('Fee percentage must be a number of reasonable size')
        return v
