# A catalog item is one purchasable book as reported by the inventory service.
# Snapshots are replaced wholesale on refresh, items are never patched in place.
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.money import Money


class CatalogItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    title: str
    author: str
    price: Money = Field(ge=Decimal("0"))
    stock: int = Field(ge=0)
    isbn: str | None = None
    genre: str | None = None

    @model_validator(mode='before')
    @classmethod
    def normalize_inventory_payload(cls, data):
        """
        Map the inventory service's `book/all` payload onto the DTO.

        The service reports the identifier as `bookId` (falling back to `isbn`)
        and the available stock as `quantity`.
        """
        if not isinstance(data, dict):
            return data

        result = dict(data)
        if result.get("id") is None:
            result["id"] = result.get("bookId") or result.get("isbn")
        if result.get("id") is not None:
            result["id"] = str(result["id"])
        if "stock" not in result and "quantity" in result:
            result["stock"] = result["quantity"]
        if result.get("isbn") is not None:
            result["isbn"] = str(result["isbn"])
        return result
