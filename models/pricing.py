from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from models.money import Money, round_money


class PriceBreakdownDTO(BaseModel):
    """
    Derived cart totals. Built from the cart on every read, never stored.

    Values are unrounded; call rounded() for display.
    """
    model_config = ConfigDict(frozen=True)

    subtotal: Money
    shipping: Money
    tax: Money
    total: Money

    @property
    def is_free_shipping(self) -> bool:
        return self.shipping == Decimal("0") and self.subtotal > Decimal("0")

    def rounded(self) -> "PriceBreakdownDTO":
        return PriceBreakdownDTO(
            subtotal=round_money(self.subtotal),
            shipping=round_money(self.shipping),
            tax=round_money(self.tax),
            total=round_money(self.total),
        )
