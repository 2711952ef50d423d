from pydantic import ValidationError

from exceptions.api import ApiRequestException
from models.catalog_item import CatalogItemDTO
from repositories.api_client import ApiClient


class CatalogRepository:

    @staticmethod
    async def get_all() -> list[CatalogItemDTO]:
        """GetAllCatalogItems: every purchasable book with its current stock."""
        url = ApiClient.build_url("book/all")
        payload = await ApiClient.fetch_api_request(url, method="GET")
        if not isinstance(payload, list):
            raise ApiRequestException("GET", url, reason="expected a list of books")
        try:
            return [CatalogItemDTO.model_validate(book) for book in payload]
        except ValidationError as e:
            raise ApiRequestException("GET", url, reason=f"invalid book payload: {e}") from e
