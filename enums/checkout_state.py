from enum import Enum


class CheckoutState(Enum):
    IDLE = "IDLE"                # No attempt yet
    SUBMITTING = "SUBMITTING"    # Payment/order calls in flight, re-entry rejected
    SUCCEEDED = "SUCCEEDED"      # Order created, cart cleared
    FAILED = "FAILED"            # Validation, payment or order step failed
