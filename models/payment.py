from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from enums.payment_status import PaymentStatus
from models.money import Money


class PaymentCreateDTO(BaseModel):
    """Body of `POST /payments/create`."""
    model_config = ConfigDict(populate_by_name=True)

    amount: Money = Field(ge=Decimal("0"))
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_code: str = Field(alias="transactionCode")


class PaymentRecordDTO(BaseModel):
    """
    Payment record as returned by the payment service.

    The create endpoint answers with `id`/`transactionCode`, the per-customer
    listing with `payment_id`/`transaction_code`; both shapes are accepted.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("id", "payment_id", "paymentId"))
    amount: Money | None = None
    status: str | None = None
    transaction_code: str | None = Field(
        default=None,
        validation_alias=AliasChoices("transactionCode", "transaction_code")
    )
    quantity: int | None = None
    total: Money | None = None

    @field_validator('id', mode='before')
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None else v
