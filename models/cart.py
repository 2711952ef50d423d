# A line item is one catalog book held in the cart. Title, author and price are
# copied when the book is first added so the cart renders without the catalog.
#
# note that the stock is NOT reserved: `stock` is the figure known at the last
# operation and is not re-checked at checkout
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from models.money import Money


class LineItemDTO(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    item_id: str
    title: str
    author: str
    price: Money = Field(ge=Decimal("0"))
    quantity: int = Field(ge=1)
    stock: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity
