from enum import Enum


class CheckoutFailureKind(Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"                  # Missing fields, no external call made
    PAYMENT_CREATION_FAILED = "PAYMENT_CREATION_FAILED"    # Step A failed, no order attempted
    ORDER_CREATION_FAILED = "ORDER_CREATION_FAILED"        # Step B failed, payment record left behind
