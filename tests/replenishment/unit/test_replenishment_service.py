"""
Unit Tests: ReplenishmentService

- find_low_stock() thresholds and recommended quantities
- quick_add() pre-filled supply lines
- create_supply_order() validation, cost, ordering and draft reset
- summary() dashboard figures
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from enums.supply_order_status import SupplyOrderStatus
from exceptions.supply import SupplyOrderValidationException
from models.supply_order import SupplyOrderDraft, SupplyOrderItemDTO
from services.replenishment import (
    DEFAULT_UNIT_COST,
    KNOWN_SUPPLIERS,
    ReplenishmentService,
)


@pytest.fixture
def advisor():
    return ReplenishmentService()


@pytest.fixture
def draft():
    return SupplyOrderDraft(
        supplier=KNOWN_SUPPLIERS[0],
        expected_delivery=date.today() + timedelta(days=7),
        items=[
            SupplyOrderItemDTO(book_title="1984", quantity=5, unit_cost=Decimal("100")),
            SupplyOrderItemDTO(book_title="Emma", quantity=3, unit_cost=Decimal("50")),
        ]
    )


class TestFindLowStock:

    def test_only_items_below_threshold(self, advisor, make_book):
        items = [make_book("1", stock=2), make_book("2", stock=3), make_book("3", stock=0)]

        entries = advisor.find_low_stock(items)

        assert [entry.item_id for entry in entries] == ["1", "3"]
        assert [entry.recommended_order for entry in entries] == [4, 6]
        assert entries[0].current_stock == 2
        assert entries[0].title == "Book 1"

    def test_no_low_stock(self, advisor, make_book):
        assert advisor.find_low_stock([make_book("1", stock=10)]) == []

    def test_thresholds_can_be_overridden(self, make_book):
        advisor = ReplenishmentService(low_stock_threshold=10, target_stock_level=20)

        entries = advisor.find_low_stock([make_book("1", stock=9), make_book("2", stock=10)])

        assert len(entries) == 1
        assert entries[0].recommended_order == 11

    def test_target_below_threshold_is_rejected(self):
        with pytest.raises(ValueError):
            ReplenishmentService(low_stock_threshold=5, target_stock_level=2)


class TestQuickAdd:

    def test_quick_add_uses_recommended_quantity_and_default_cost(self, advisor, make_book):
        entry = advisor.find_low_stock([make_book("1", stock=1, isbn="9780451524935")])[0]
        draft = SupplyOrderDraft()

        item = ReplenishmentService.quick_add(draft, entry)

        assert draft.items == [item]
        assert item.book_title == "Book 1"
        assert item.isbn == "9780451524935"
        assert item.quantity == 5
        assert item.unit_cost == DEFAULT_UNIT_COST
        assert draft.total_cost == Decimal("500")


class TestCreateSupplyOrder:

    def test_create_supply_order(self, advisor, draft):
        expected_delivery = draft.expected_delivery

        order = advisor.create_supply_order(draft)

        assert order.id.startswith("SO-")
        assert order.status == SupplyOrderStatus.PENDING
        assert order.total_cost == Decimal("650")
        assert order.order_date == date.today()
        assert order.expected_delivery == expected_delivery
        assert len(order.items) == 2
        assert advisor.supply_orders == [order]

    def test_confirmation_message(self, advisor, draft):
        order = advisor.create_supply_order(draft)

        message = ReplenishmentService.confirmation_message(order)

        assert message == f"Supply order {order.id} created for Penguin Random House (R650.00)."

    def test_draft_is_reset_after_creation(self, advisor, draft):
        advisor.create_supply_order(draft)

        assert draft.supplier == ""
        assert draft.expected_delivery is None
        assert draft.items == []

    def test_newest_order_first(self, advisor, draft):
        first = advisor.create_supply_order(draft.model_copy(deep=True))
        second = advisor.create_supply_order(draft)

        assert advisor.supply_orders == [second, first]

    @pytest.mark.parametrize("field, value, missing", [
        ("supplier", "  ", "supplier"),
        ("expected_delivery", None, "expected_delivery"),
        ("items", [], "items"),
    ])
    def test_incomplete_draft_is_rejected(self, advisor, draft, field, value, missing):
        setattr(draft, field, value)

        with pytest.raises(SupplyOrderValidationException) as exc_info:
            advisor.create_supply_order(draft)

        assert exc_info.value.missing_fields == [missing]
        assert advisor.supply_orders == []

    def test_rejected_draft_is_kept(self, advisor, draft):
        draft.supplier = ""

        with pytest.raises(SupplyOrderValidationException):
            advisor.create_supply_order(draft)

        assert len(draft.items) == 2

    def test_total_cost_is_fixed_at_creation(self, advisor, draft):
        order = advisor.create_supply_order(draft)
        draft.add_item(SupplyOrderItemDTO(book_title="Late", quantity=1, unit_cost=Decimal("999")))

        assert advisor.get(order.id).total_cost == Decimal("650")


class TestStatusAndSummary:

    def test_apply_status_update_replaces_record(self, advisor, draft):
        order = advisor.create_supply_order(draft)

        updated = advisor.apply_status_update(order.id, SupplyOrderStatus.SHIPPED)

        assert updated.status == SupplyOrderStatus.SHIPPED
        assert order.status == SupplyOrderStatus.PENDING
        assert advisor.get(order.id) == updated

    def test_apply_status_update_unknown_id(self, advisor):
        assert advisor.apply_status_update("SO-0", SupplyOrderStatus.DELIVERED) is None

    def test_summary(self, advisor, draft):
        shipped = advisor.create_supply_order(draft.model_copy(deep=True))
        advisor.create_supply_order(draft)
        advisor.apply_status_update(shipped.id, SupplyOrderStatus.SHIPPED)

        summary = advisor.summary()

        assert summary.pending_count == 1
        assert summary.in_transit_count == 1
        assert summary.total_spend == Decimal("1300")

    def test_summary_empty(self, advisor):
        summary = advisor.summary()

        assert summary.pending_count == 0
        assert summary.total_spend == 0
