from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated

from pydantic import PlainSerializer

CENT = Decimal("0.01")

# Decimal internally, plain JSON number on the wire (the backend expects numbers, not strings)
Money = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]


def round_money(amount: Decimal) -> Decimal:
    """Round to cents for display and for amounts sent to the backend."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
