from pydantic import ValidationError

from exceptions.api import ApiRequestException
from models.payment import PaymentCreateDTO, PaymentRecordDTO
from repositories.api_client import ApiClient


class PaymentRepository:

    @staticmethod
    async def create(payment_dto: PaymentCreateDTO) -> PaymentRecordDTO:
        """CreatePaymentRecord: returns the record with its server-assigned id."""
        url = ApiClient.build_url("payments/create")
        payload = await ApiClient.fetch_api_request(
            url,
            method="POST",
            data=payment_dto.model_dump_json(by_alias=True)
        )
        try:
            return PaymentRecordDTO.model_validate(payload)
        except ValidationError as e:
            raise ApiRequestException("POST", url, reason=f"invalid payment payload: {e}") from e

    @staticmethod
    async def get_by_customer(customer_id: int) -> list[PaymentRecordDTO]:
        """ListPaymentsForCustomer."""
        url = ApiClient.build_url(f"payments/user/{customer_id}")
        payload = await ApiClient.fetch_api_request(url, method="GET")
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ApiRequestException("GET", url, reason="expected a list of payments")
        try:
            return [PaymentRecordDTO.model_validate(payment) for payment in payload]
        except ValidationError as e:
            raise ApiRequestException("GET", url, reason=f"invalid payment payload: {e}") from e
