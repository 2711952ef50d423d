from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from enums.supply_order_status import SupplyOrderStatus
from models.money import Money


class SupplyOrderItemDTO(BaseModel):
    book_title: str
    isbn: str | None = None
    quantity: int = Field(ge=1)
    unit_cost: Money = Field(ge=Decimal("0"))

    @property
    def line_cost(self) -> Decimal:
        return self.unit_cost * self.quantity


class SupplyOrderDTO(BaseModel):
    """
    A placed supplier restock order.

    total_cost is computed once when the order is created and stored as-is.
    Status changes arrive from outside and produce a new record.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    supplier: str
    items: tuple[SupplyOrderItemDTO, ...]
    status: SupplyOrderStatus = SupplyOrderStatus.PENDING
    order_date: date
    expected_delivery: date
    total_cost: Money
    notes: str = ""


class LowStockEntryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    title: str
    author: str
    isbn: str | None = None
    current_stock: int
    recommended_order: int


class SupplyOrderDraft(BaseModel):
    """
    In-progress supply order, filled in by the admin before submission.

    Session-local: it is reset after a supply order is created from it.
    """

    supplier: str = ""
    expected_delivery: date | None = None
    notes: str = ""
    items: list[SupplyOrderItemDTO] = Field(default_factory=list)

    def add_item(self, item: SupplyOrderItemDTO) -> None:
        self.items.append(item)

    def remove_item(self, index: int) -> SupplyOrderItemDTO:
        return self.items.pop(index)

    @property
    def total_cost(self) -> Decimal:
        """Running preview of the order cost while the draft is edited."""
        return sum((item.line_cost for item in self.items), Decimal("0"))

    def reset(self) -> None:
        self.supplier = ""
        self.expected_delivery = None
        self.notes = ""
        self.items = []


class SupplyOrderSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    pending_count: int
    in_transit_count: int
    total_spend: Money
