from pydantic import BaseModel, ConfigDict, field_validator

from enums.checkout_failure_kind import CheckoutFailureKind
from enums.checkout_state import CheckoutState
from enums.payment_method import PaymentMethod


class CheckoutFormDTO(BaseModel):
    shipping_address: str = ""
    payment_method: PaymentMethod | None = None

    @field_validator('shipping_address', mode='before')
    @classmethod
    def strip_address(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('payment_method', mode='before')
    @classmethod
    def parse_payment_method(cls, v):
        """Accept the select box value ("" means nothing selected)."""
        if v is None or isinstance(v, PaymentMethod):
            return v
        if isinstance(v, str):
            if not v.strip():
                return None
            return PaymentMethod.from_string(v)
        raise ValueError(f"Payment method must be a string, got {type(v)}")


class CheckoutResultDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: CheckoutState
    message: str
    order_id: str | None = None
    payment_id: str | None = None
    failure_kind: CheckoutFailureKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == CheckoutState.SUCCEEDED
