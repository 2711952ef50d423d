from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from enums.payment_method import PaymentMethod


class OrderItemDTO(BaseModel):
    """Line item as sent to the order service: identifier and quantity only."""
    id: str
    quantity: int = Field(ge=1)


class OrderCreateDTO(BaseModel):
    """Body of `POST /orders/create?userId=<customer>`."""
    model_config = ConfigDict(populate_by_name=True)

    shipping_address: str = Field(alias="shippingAddress")
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    items: list[OrderItemDTO]
    payment_id: str | None = Field(default=None, alias="paymentId")


class CustomerDetailsDTO(BaseModel):
    """Customer contact and delivery details captured by staff for a manual order."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone: str = ""
    address: str = ""

    @field_validator('first_name', 'last_name', 'email', 'phone', 'address', mode='before')
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v


class ManualOrderCreateDTO(BaseModel):
    """
    Body of `POST /orders/create?userId=<customer>` for an order entered by staff.

    Carries the customer's details instead of a shipping address and has no
    payment record reference.
    """
    model_config = ConfigDict(populate_by_name=True)

    items: list[OrderItemDTO]
    customer: CustomerDetailsDTO
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    notes: str = ""


class OrderDTO(BaseModel):
    """Order as returned by the order service."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    order_id: str = Field(validation_alias=AliasChoices("orderId", "order_id", "id"))
    payment_id: str | None = Field(default=None, validation_alias=AliasChoices("paymentId", "payment_id"))

    @field_validator('order_id', 'payment_id', mode='before')
    @classmethod
    def stringify_ids(cls, v):
        return str(v) if v is not None else v
