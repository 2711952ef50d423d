import logging

from exceptions.api import ApiRequestException
from exceptions.payment import PaymentHistoryFetchFailedException
from models.payment import PaymentRecordDTO
from repositories.payment import PaymentRepository
from utils.error_handler import handle_service_error

logger = logging.getLogger(__name__)


class PaymentService:

    @staticmethod
    async def list_for_customer(customer_id: int) -> tuple[list[PaymentRecordDTO], str | None]:
        """
        Payment history for a customer.

        Returns:
            (payments, error_message)
            - payments: Records from the payment service (empty on failure)
            - error_message: Localized message if the fetch failed, else None
        """
        try:
            payments = await PaymentRepository.get_by_customer(customer_id)
        except ApiRequestException as e:
            logger.error(f"[Payment] Could not load payments for customer {customer_id}: {e}")
            error = PaymentHistoryFetchFailedException(customer_id, reason=str(e))
            return [], handle_service_error(error)

        logger.info(f"[Payment] Loaded {len(payments)} payments for customer {customer_id}")
        return payments, None
