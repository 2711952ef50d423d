from pydantic import ValidationError

from exceptions.api import ApiRequestException
from models.order import ManualOrderCreateDTO, OrderCreateDTO, OrderDTO
from repositories.api_client import ApiClient


class OrderRepository:

    @staticmethod
    async def create(customer_id: int, order_dto: OrderCreateDTO | ManualOrderCreateDTO) -> OrderDTO:
        """
        CreateOrder, scoped to the acting customer via the `userId` query parameter.

        Checkout sends an OrderCreateDTO that references its payment record;
        staff-entered orders send a ManualOrderCreateDTO with the customer's details.
        """
        url = ApiClient.build_url("orders/create")
        payload = await ApiClient.fetch_api_request(
            url,
            method="POST",
            data=order_dto.model_dump_json(by_alias=True),
            params={"userId": str(customer_id)}
        )
        try:
            return OrderDTO.model_validate(payload)
        except ValidationError as e:
            raise ApiRequestException("POST", url, reason=f"invalid order payload: {e}") from e
