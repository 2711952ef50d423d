import logging

from enums.message_entity import MessageEntity
from enums.payment_method import PaymentMethod
from exceptions.api import ApiRequestException
from exceptions.order import ManualOrderFailedException, ManualOrderValidationException
from models.order import CustomerDetailsDTO, ManualOrderCreateDTO, OrderDTO
from repositories.order import OrderRepository
from services.cart import CartLedger
from utils.localizator import Localizator

logger = logging.getLogger(__name__)


class OrderService:
    """
    Orders entered by staff on a customer's behalf.

    The books are collected in a CartLedger with the same stock rules as the
    storefront cart. Unlike checkout, no payment record is created first: the
    order is sent on its own with the customer's details and staff notes.
    """

    @staticmethod
    async def create_manual_order(
        cart: CartLedger,
        customer_id: int,
        customer: CustomerDetailsDTO,
        payment_method: PaymentMethod | None,
        notes: str = ""
    ) -> OrderDTO:
        """
        Send a staff-entered order to the order service.

        On success the ordered lines are taken out of the cart. On failure the
        cart is left as it was.

        Args:
            cart: Books selected for the customer
            customer_id: Customer the order is placed for (`userId`)
            customer: Name, email, phone and delivery address
            payment_method: How the customer will pay
            notes: Free-text instructions for fulfilment

        Raises:
            ManualOrderValidationException: Books, name, email, address or payment
                method are missing (nothing is sent)
            ManualOrderFailedException: The order service call failed
        """
        missing_fields = []
        if cart.is_empty:
            missing_fields.append("items")
        if not customer.first_name:
            missing_fields.append("first_name")
        if not customer.last_name:
            missing_fields.append("last_name")
        if not customer.email:
            missing_fields.append("email")
        if not customer.address:
            missing_fields.append("address")
        if payment_method is None:
            missing_fields.append("payment_method")
        if missing_fields:
            raise ManualOrderValidationException(customer_id, missing_fields)

        items = cart.to_order_items()
        try:
            order = await OrderRepository.create(customer_id, ManualOrderCreateDTO(
                items=items,
                customer=customer,
                payment_method=payment_method,
                notes=notes.strip()
            ))
        except ApiRequestException as e:
            logger.error(f"[Order] Manual order for customer {customer_id} failed: {e}")
            raise ManualOrderFailedException(customer_id, reason=str(e)) from e

        cart.remove_ordered(items)
        logger.info(f"[Order] Manual order {order.order_id} created for customer {customer_id}: "
                    f"{len(items)} lines, {payment_method.value}")
        return order

    @staticmethod
    def confirmation_message(order: OrderDTO) -> str:
        return Localizator.get_text(MessageEntity.ADMIN, "manual_order_created").format(order_id=order.order_id)
