"""
Error Handler Utility

Provides centralized error handling at operation boundaries with:
- Localized error messages
- Automatic exception to message mapping
- Logging for diagnostics

Usage:
    from utils.error_handler import handle_service_error

    try:
        order = replenishment.create_supply_order(draft)
    except BookstoreException as e:
        error_message = handle_service_error(e, MessageEntity.ADMIN)
"""

import logging

from enums.message_entity import MessageEntity
from exceptions import (
    BookstoreException,
    ApiRequestException,
    CatalogFetchFailedException,
    CartItemNotFoundException,
    CheckoutValidationException,
    CheckoutInProgressException,
    ManualOrderFailedException,
    ManualOrderValidationException,
    PaymentCreationFailedException,
    OrderCreationFailedException,
    PaymentHistoryFetchFailedException,
    SupplyOrderValidationException,
)
from utils.localizator import Localizator

logger = logging.getLogger(__name__)

# Exception type -> (entity override, localization key).
# An entity of None means "use the caller's entity".
ERROR_MAPPING: dict[type, tuple[MessageEntity | None, str]] = {
    # Checkout: payment and order failures share one customer-facing message
    CheckoutValidationException: (MessageEntity.USER, "error_checkout_validation"),
    CheckoutInProgressException: (MessageEntity.USER, "error_checkout_in_progress"),
    PaymentCreationFailedException: (MessageEntity.USER, "error_checkout_failed"),
    OrderCreationFailedException: (MessageEntity.USER, "error_checkout_failed"),

    # Manual orders (staff)
    ManualOrderValidationException: (MessageEntity.ADMIN, "error_manual_order_validation"),
    ManualOrderFailedException: (MessageEntity.ADMIN, "error_manual_order_failed"),

    # Cart
    CartItemNotFoundException: (MessageEntity.USER, "error_cart_item_not_found"),

    # Reads
    CatalogFetchFailedException: (None, "error_catalog_fetch"),
    PaymentHistoryFetchFailedException: (MessageEntity.USER, "error_payments_fetch"),
    ApiRequestException: (None, "error_api_request"),

    # Replenishment
    SupplyOrderValidationException: (MessageEntity.ADMIN, "error_supply_order_validation"),
}


def _describe_missing_fields(missing_fields: list[str]) -> str:
    names = [
        Localizator.get_text(MessageEntity.COMMON, f"field_{field}")
        for field in missing_fields
    ]
    return ", ".join(names)


def handle_service_error(exception: BookstoreException, entity: MessageEntity = MessageEntity.USER) -> str:
    """
    Convert service exception to localized user-friendly error message.

    Args:
        exception: The custom exception raised by a service
        entity: Message entity for localization (ADMIN or USER)

    Returns:
        Localized error message string

    Example:
        try:
            order = replenishment.create_supply_order(draft)
        except SupplyOrderValidationException as e:
            message = handle_service_error(e, MessageEntity.ADMIN)
    """
    logger.warning(f"Service error handled: {type(exception).__name__} - {exception}")

    mapping = ERROR_MAPPING.get(type(exception))
    if not mapping:
        logger.error(f"Unmapped exception type: {type(exception).__name__}")
        return Localizator.get_text(entity, "error_unexpected")

    entity_override, localization_key = mapping
    target_entity = entity_override or entity

    format_args = {}
    if isinstance(exception, (CheckoutValidationException, ManualOrderValidationException)):
        format_args['fields'] = _describe_missing_fields(exception.missing_fields)

    return Localizator.get_text(target_entity, localization_key).format(**format_args)


def handle_unexpected_error(exception: Exception, entity: MessageEntity = MessageEntity.USER) -> str:
    """
    Handle unexpected exceptions (non-BookstoreException).

    Logs the full traceback and returns the generic error message.
    """
    logger.exception(f"Unexpected error: {type(exception).__name__} - {exception}", exc_info=exception)
    return Localizator.get_text(entity, "error_unexpected")
