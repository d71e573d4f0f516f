from pydantic import BaseModel, ConfigDict


class CalculationContext(BaseModel):
    """Where a cart recalculation was triggered from."""
    model_config = ConfigDict(frozen=True)

    is_admin_request: bool = False
    is_async_update: bool = False

    @property
    def allows_fee_calculation(self) -> bool:
        # Admin page renders only recalculate carts when they are serving an async cart update
        return not self.is_admin_request or self.is_async_update

    @classmethod
    def from_request(cls, request) -> "CalculationContext":
        if request is None:
            return cls()
        return cls(
            is_admin_request=request.path.startswith('/admin/'),
            is_async_update=request.headers.get('x-requested-with') == 'XMLHttpRequest',
        )
