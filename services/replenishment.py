import logging
import time
from datetime import date
from decimal import Decimal
from typing import Iterable

from enums.message_entity import MessageEntity
from enums.supply_order_status import SupplyOrderStatus
from exceptions.supply import SupplyOrderValidationException
from models.catalog_item import CatalogItemDTO
from models.supply_order import (
    LowStockEntryDTO,
    SupplyOrderDraft,
    SupplyOrderDTO,
    SupplyOrderItemDTO,
    SupplyOrderSummaryDTO,
)
from services.pricing import PricingService
from utils.localizator import Localizator

logger = logging.getLogger(__name__)

# Reorder policy defaults
LOW_STOCK_THRESHOLD = 3  # stock strictly below this is "low"
TARGET_STOCK_LEVEL = 6   # recommended order tops stock back up to this
DEFAULT_UNIT_COST = Decimal("100")

KNOWN_SUPPLIERS = [
    "Penguin Random House",
    "HarperCollins",
    "Simon & Schuster",
    "Macmillan Publishers",
    "Scholastic Corporation",
]


class ReplenishmentService:
    """
    Replenishment Advisor.

    Turns low-stock catalog signals into reorder recommendations and records
    supply orders placed from a draft. Orders are kept most recent first.
    The advisor only ever creates orders; status changes come from the
    supplier side through apply_status_update().
    """

    def __init__(
        self,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        target_stock_level: int = TARGET_STOCK_LEVEL
    ) -> None:
        if target_stock_level < low_stock_threshold:
            raise ValueError(
                f"Target stock level ({target_stock_level}) must not be below "
                f"the low stock threshold ({low_stock_threshold})"
            )
        self.low_stock_threshold = low_stock_threshold
        self.target_stock_level = target_stock_level
        self.supply_orders: list[SupplyOrderDTO] = []
        self._last_id_millis = 0

    def find_low_stock(self, items: Iterable[CatalogItemDTO]) -> list[LowStockEntryDTO]:
        """Entries for every item below the threshold, in catalog order."""
        entries = [
            LowStockEntryDTO(
                item_id=item.id,
                title=item.title,
                author=item.author,
                isbn=item.isbn,
                current_stock=item.stock,
                recommended_order=self.target_stock_level - item.stock
            )
            for item in items
            if item.stock < self.low_stock_threshold
        ]
        logger.info(f"[Replenishment] {len(entries)} items below stock threshold {self.low_stock_threshold}")
        return entries

    @staticmethod
    def quick_add(draft: SupplyOrderDraft, entry: LowStockEntryDTO) -> SupplyOrderItemDTO:
        """Add a low-stock recommendation to the draft at the default unit cost."""
        item = SupplyOrderItemDTO(
            book_title=entry.title,
            isbn=entry.isbn,
            quantity=entry.recommended_order,
            unit_cost=DEFAULT_UNIT_COST
        )
        draft.add_item(item)
        return item

    def create_supply_order(self, draft: SupplyOrderDraft) -> SupplyOrderDTO:
        """
        Place a supply order from a completed draft.

        The total cost is fixed at creation. On success the order is stored
        at the front of supply_orders and the draft is reset.

        Raises:
            SupplyOrderValidationException: Supplier, expected delivery or items
                are missing (nothing is created and the draft is kept)
        """
        missing_fields = []
        if not draft.supplier.strip():
            missing_fields.append("supplier")
        if draft.expected_delivery is None:
            missing_fields.append("expected_delivery")
        if not draft.items:
            missing_fields.append("items")
        if missing_fields:
            raise SupplyOrderValidationException(missing_fields)

        order = SupplyOrderDTO(
            id=self._next_order_id(),
            supplier=draft.supplier.strip(),
            items=tuple(draft.items),
            status=SupplyOrderStatus.PENDING,
            order_date=date.today(),
            expected_delivery=draft.expected_delivery,
            total_cost=draft.total_cost,
            notes=draft.notes
        )
        self.supply_orders.insert(0, order)
        draft.reset()

        logger.info(f"[Replenishment] Created supply order {order.id} for {order.supplier}: "
                    f"{len(order.items)} lines, total={order.total_cost}")
        return order

    @staticmethod
    def confirmation_message(order: SupplyOrderDTO) -> str:
        return Localizator.get_text(MessageEntity.ADMIN, "supply_order_created").format(
            order_id=order.id,
            supplier=order.supplier,
            total_cost=PricingService.format_currency(order.total_cost)
        )

    def _next_order_id(self) -> str:
        # Ids are creation timestamps; two orders in the same millisecond get consecutive ids
        self._last_id_millis = max(int(time.time() * 1000), self._last_id_millis + 1)
        return f"SO-{self._last_id_millis}"

    def get(self, order_id: str) -> SupplyOrderDTO | None:
        return next((order for order in self.supply_orders if order.id == order_id), None)

    def apply_status_update(self, order_id: str, status: SupplyOrderStatus) -> SupplyOrderDTO | None:
        """
        Record a status reported by the supplier/back office.

        Returns:
            The updated order, or None if the id is unknown
        """
        for index, order in enumerate(self.supply_orders):
            if order.id == order_id:
                updated = order.model_copy(update={'status': status})
                self.supply_orders[index] = updated
                logger.info(f"[Replenishment] Supply order {order_id}: {order.status.value} -> {status.value}")
                return updated

        logger.warning(f"[Replenishment] Status update for unknown supply order {order_id}")
        return None

    def summary(self) -> SupplyOrderSummaryDTO:
        return SupplyOrderSummaryDTO(
            pending_count=sum(1 for o in self.supply_orders if o.status == SupplyOrderStatus.PENDING),
            in_transit_count=sum(1 for o in self.supply_orders if o.status == SupplyOrderStatus.SHIPPED),
            total_spend=sum((o.total_cost for o in self.supply_orders), Decimal("0"))
        )
