"""
Custom exceptions for the bookstore core.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
BookstoreException (base)
├── ApiRequestException
├── CatalogException
│   └── CatalogFetchFailedException
├── CartException
│   └── CartItemNotFoundException
├── CheckoutException
│   ├── CheckoutValidationException
│   ├── CheckoutInProgressException
│   ├── PaymentCreationFailedException
│   └── OrderCreationFailedException
├── ManualOrderException
│   ├── ManualOrderValidationException
│   └── ManualOrderFailedException
├── PaymentException
│   └── PaymentHistoryFetchFailedException
└── SupplyOrderException
    └── SupplyOrderValidationException

Usage:
------
Repositories raise ApiRequestException for any failed backend call.
Services translate it into a domain exception:
    raise PaymentCreationFailedException(transaction_code, reason=str(e))

Callers turn domain exceptions into user-facing messages:
    try:
        order = replenishment.create_supply_order(draft)
    except SupplyOrderValidationException as e:
        message = handle_service_error(e)
"""

from .base import BookstoreException
from .api import ApiRequestException
from .catalog import CatalogException, CatalogFetchFailedException
from .cart import CartException, CartItemNotFoundException
from .checkout import (
    CheckoutException,
    CheckoutValidationException,
    CheckoutInProgressException,
    PaymentCreationFailedException,
    OrderCreationFailedException
)
from .order import ManualOrderException, ManualOrderValidationException, ManualOrderFailedException
from .payment import PaymentException, PaymentHistoryFetchFailedException
from .supply import SupplyOrderException, SupplyOrderValidationException

__all__ = [
    # Base
    'BookstoreException',

    # API
    'ApiRequestException',

    # Catalog
    'CatalogException',
    'CatalogFetchFailedException',

    # Cart
    'CartException',
    'CartItemNotFoundException',

    # Checkout
    'CheckoutException',
    'CheckoutValidationException',
    'CheckoutInProgressException',
    'PaymentCreationFailedException',
    'OrderCreationFailedException',

    # Manual orders
    'ManualOrderException',
    'ManualOrderValidationException',
    'ManualOrderFailedException',

    # Payment
    'PaymentException',
    'PaymentHistoryFetchFailedException',

    # Supply orders
    'SupplyOrderException',
    'SupplyOrderValidationException',
]
