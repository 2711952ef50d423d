from enum import Enum


class PaymentMethod(str, Enum):
    """
    Payment methods offered on the checkout form.

    Values are sent to the order service verbatim.
    """

    CARD = "Card"
    EFT = "EFT"
    CASH_ON_DELIVERY = "Cash on Delivery"

    @classmethod
    def from_string(cls, value: str) -> 'PaymentMethod':
        """
        Convert form input to PaymentMethod.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            ValueError: If value is empty or not a known method

        Examples:
            >>> PaymentMethod.from_string("card")
            PaymentMethod.CARD
            >>> PaymentMethod.from_string(" Cash on delivery ")
            PaymentMethod.CASH_ON_DELIVERY
        """
        if not value or not value.strip():
            raise ValueError("Payment method cannot be empty")

        normalized = value.strip().lower()
        for method in cls:
            if method.value.lower() == normalized:
                return method

        valid = ', '.join(m.value for m in cls)
        raise ValueError(f"Unknown payment method '{value}'. Valid methods: {valid}")
