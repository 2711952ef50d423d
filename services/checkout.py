import inspect
import logging
import time
import uuid
from decimal import Decimal
from typing import Awaitable, Callable

from enums.checkout_failure_kind import CheckoutFailureKind
from enums.checkout_state import CheckoutState
from enums.message_entity import MessageEntity
from exceptions.api import ApiRequestException
from exceptions.checkout import (
    CheckoutException,
    CheckoutInProgressException,
    CheckoutValidationException,
    OrderCreationFailedException,
    PaymentCreationFailedException,
)
from models.checkout import CheckoutFormDTO, CheckoutResultDTO
from models.money import round_money
from models.order import OrderCreateDTO, OrderDTO, OrderItemDTO
from models.payment import PaymentCreateDTO, PaymentRecordDTO
from repositories.order import OrderRepository
from repositories.payment import PaymentRepository
from services.cart import CartLedger
from services.pricing import PricingService
from utils.error_handler import handle_service_error, handle_unexpected_error
from utils.localizator import Localizator

logger = logging.getLogger(__name__)

OrderPlacedCallback = Callable[[CheckoutResultDTO], Awaitable[None] | None]


def generate_transaction_code() -> str:
    """Fresh client-side token for one payment attempt, e.g. TX-1760860800000-9f86d081."""
    return f"TX-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class CheckoutService:
    """
    Checkout Orchestrator.

    State machine: IDLE -> SUBMITTING -> SUCCEEDED | FAILED. A new attempt can
    start from any state except SUBMITTING.

    Flow:
    1. Validate cart, shipping address and payment method (no external call on failure)
    2. Create the payment record (status "Pending", fresh transaction code)
    3. Create the order referencing that payment
    4. Take the ordered lines out of the cart and notify listeners (e.g. cart badge refresh)

    The two writes are NOT transactional: if step 3 fails, the payment record
    from step 2 stays on the backend. A retry is a brand-new attempt with a new
    transaction code.

    The order is built from a snapshot of the cart taken before the first
    backend call. Books added while the attempt is in flight are not part of
    the order and stay in the cart afterwards.
    """

    def __init__(
        self,
        cart: CartLedger,
        customer_id: int,
        transaction_code_factory: Callable[[], str] = generate_transaction_code
    ) -> None:
        self.cart = cart
        self.customer_id = customer_id
        self.state = CheckoutState.IDLE
        self.last_result: CheckoutResultDTO | None = None
        self._new_transaction_code = transaction_code_factory
        self._order_placed_callbacks: list[OrderPlacedCallback] = []

    def on_order_placed(self, callback: OrderPlacedCallback) -> OrderPlacedCallback:
        """Register a listener for successful checkouts (usable as a decorator)."""
        self._order_placed_callbacks.append(callback)
        return callback

    @property
    def is_submitting(self) -> bool:
        return self.state == CheckoutState.SUBMITTING

    async def submit_checkout(self, form: CheckoutFormDTO) -> CheckoutResultDTO:
        """
        Run one checkout attempt.

        Failures never raise: they come back as a FAILED result with a
        localized message (and a failure kind for the known failures). The
        cart only changes on success.

        Raises:
            CheckoutInProgressException: If an attempt is already in flight
        """
        if self.is_submitting:
            raise CheckoutInProgressException(self.customer_id)

        try:
            self._validate(form)
        except CheckoutValidationException as e:
            return self._fail(e, CheckoutFailureKind.VALIDATION_ERROR)

        self.state = CheckoutState.SUBMITTING
        breakdown = PricingService.calculate(self.cart)
        items = self.cart.to_order_items()
        logger.info(f"[Checkout] Customer {self.customer_id}: {len(items)} lines, "
                    f"total={round_money(breakdown.total)}")

        try:
            payment, order = await self._place_order(form, round_money(breakdown.total), items)
        except PaymentCreationFailedException as e:
            return self._fail(e, CheckoutFailureKind.PAYMENT_CREATION_FAILED)
        except OrderCreationFailedException as e:
            return self._fail(e, CheckoutFailureKind.ORDER_CREATION_FAILED)
        except Exception as e:
            self.state = CheckoutState.FAILED
            result = CheckoutResultDTO(
                status=CheckoutState.FAILED,
                message=handle_unexpected_error(e, MessageEntity.USER)
            )
            self.last_result = result
            return result

        self.cart.remove_ordered(items)
        self.state = CheckoutState.SUCCEEDED
        result = CheckoutResultDTO(
            status=CheckoutState.SUCCEEDED,
            order_id=order.order_id,
            payment_id=payment.id,
            message=Localizator.get_text(MessageEntity.USER, "checkout_success").format(order_id=order.order_id)
        )
        self.last_result = result
        logger.info(f"[Checkout] Order {order.order_id} placed for customer {self.customer_id} "
                    f"(payment {payment.id})")

        await self._notify_order_placed(result)
        return result

    def _validate(self, form: CheckoutFormDTO) -> None:
        missing_fields = []
        if self.cart.is_empty:
            missing_fields.append("items")
        if not form.shipping_address:
            missing_fields.append("shipping_address")
        if form.payment_method is None:
            missing_fields.append("payment_method")

        if missing_fields:
            raise CheckoutValidationException(self.customer_id, missing_fields)

    async def _place_order(
        self,
        form: CheckoutFormDTO,
        amount: Decimal,
        items: list[OrderItemDTO]
    ) -> tuple[PaymentRecordDTO, OrderDTO]:
        """
        Payment first, then the order that references it.

        The order call is never issued before the payment call has resolved,
        and never issued at all if the payment call failed.
        """
        transaction_code = self._new_transaction_code()
        try:
            payment = await PaymentRepository.create(PaymentCreateDTO(
                amount=amount,
                transaction_code=transaction_code
            ))
        except ApiRequestException as e:
            raise PaymentCreationFailedException(transaction_code, reason=str(e)) from e

        logger.info(f"[Checkout] Payment record {payment.id} created ({transaction_code})")

        try:
            order = await OrderRepository.create(self.customer_id, OrderCreateDTO(
                shipping_address=form.shipping_address,
                payment_method=form.payment_method,
                items=items,
                payment_id=payment.id
            ))
        except ApiRequestException as e:
            logger.warning(f"[Checkout] Payment record {payment.id} left without an order")
            raise OrderCreationFailedException(payment.id, reason=str(e)) from e

        return payment, order

    def _fail(self, exception: CheckoutException, kind: CheckoutFailureKind) -> CheckoutResultDTO:
        self.state = CheckoutState.FAILED
        logger.error(f"[Checkout] {kind.value} for customer {self.customer_id}: {exception}")
        result = CheckoutResultDTO(
            status=CheckoutState.FAILED,
            failure_kind=kind,
            payment_id=getattr(exception, 'payment_id', None),
            message=handle_service_error(exception, MessageEntity.USER)
        )
        self.last_result = result
        return result

    async def _notify_order_placed(self, result: CheckoutResultDTO) -> None:
        for callback in self._order_placed_callbacks:
            try:
                outcome = callback(result)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                # The order exists; a broken listener must not turn success into failure
                logger.exception(f"[Checkout] Order-placed listener {callback!r} failed: {e}")
