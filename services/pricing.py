from decimal import Decimal
from typing import Iterable

import config
from enums.message_entity import MessageEntity
from models.cart import LineItemDTO
from models.money import round_money
from models.pricing import PriceBreakdownDTO
from services.cart import CartLedger
from utils.localizator import Localizator

# Fixed business parameters (ZAR)
FREE_SHIPPING_THRESHOLD = Decimal("650")
FLAT_SHIPPING_FEE = Decimal("89.99")
TAX_RATE = Decimal("0.15")  # 15% VAT

ZERO = Decimal("0")


class PricingService:
    """Pure cart pricing: subtotal, shipping, VAT and grand total."""

    @staticmethod
    def calculate_subtotal(lines: Iterable[LineItemDTO]) -> Decimal:
        return sum((line.price * line.quantity for line in lines), ZERO)

    @staticmethod
    def calculate_shipping(subtotal: Decimal) -> Decimal:
        """
        Flat fee unless the subtotal is strictly above the free shipping threshold.
        """
        return ZERO if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_FEE

    @staticmethod
    def calculate_tax(subtotal: Decimal) -> Decimal:
        return subtotal * TAX_RATE

    @staticmethod
    def calculate(cart: CartLedger | Iterable[LineItemDTO]) -> PriceBreakdownDTO:
        """
        Price a cart.

        Values are accumulated unrounded so repeated display updates don't
        compound rounding error; use PriceBreakdownDTO.rounded() to present.

        Example:
            2 x R200 + 1 x R50:
            subtotal 450, shipping 89.99 (450 <= 650), tax 67.5, total 607.49
        """
        lines = cart.items if isinstance(cart, CartLedger) else list(cart)
        subtotal = PricingService.calculate_subtotal(lines)
        # An empty cart ships nothing
        shipping = PricingService.calculate_shipping(subtotal) if lines else ZERO
        tax = PricingService.calculate_tax(subtotal)
        return PriceBreakdownDTO(
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax
        )

    @staticmethod
    def amount_until_free_shipping(subtotal: Decimal) -> Decimal:
        """How much more the customer must add before shipping becomes free (0 once it is)."""
        if subtotal > FREE_SHIPPING_THRESHOLD:
            return ZERO
        return FREE_SHIPPING_THRESHOLD - subtotal

    @staticmethod
    def free_shipping_hint(subtotal: Decimal) -> str | None:
        """Cart page nudge, e.g. "Add R200.00 more for free shipping!"; None when there is nothing to add."""
        remaining = PricingService.amount_until_free_shipping(subtotal)
        if remaining <= ZERO:
            return None
        return Localizator.get_text(MessageEntity.USER, "free_shipping_hint").format(
            amount=PricingService.format_currency(remaining)
        )

    @staticmethod
    def format_currency(amount: Decimal) -> str:
        """
        Format an amount for display, e.g. `R1 234.50`.

        Example:
            >>> PricingService.format_currency(Decimal("607.49"))
            'R607.49'
        """
        rounded = round_money(amount)
        sign = "-" if rounded < ZERO else ""
        grouped = f"{abs(rounded):,.2f}".replace(",", " ")
        return f"{sign}{config.CURRENCY_SYMBOL}{grouped}"
