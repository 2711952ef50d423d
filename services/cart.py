import logging

from exceptions.cart import CartItemNotFoundException
from models.cart import LineItemDTO
from models.catalog_item import CatalogItemDTO
from models.order import OrderItemDTO

logger = logging.getLogger(__name__)


class CartLedger:
    """
    Session-local cart: an ordered collection of line items keyed by item id.

    All mutations go through the methods below. Every operation keeps each
    line's quantity within [1, stock known at the time of the operation];
    lines that would drop below 1 are removed instead.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which is the display order of the cart
        self._lines: dict[str, LineItemDTO] = {}

    def add(self, item: CatalogItemDTO, catalog_stock: int) -> bool:
        """
        Add one copy of a catalog book.

        - Existing line below the stock ceiling: quantity + 1
        - Existing line at the ceiling: silent no-op
        - New line: inserted with quantity 1 if the book is in stock

        Args:
            item: Catalog book being added
            catalog_stock: Stock figure from the current catalog snapshot

        Returns:
            True if the cart changed, False if the add was refused
        """
        line = self._lines.get(item.id)
        if line is not None:
            return self._bump(line, catalog_stock)

        if catalog_stock <= 0:
            logger.debug(f"[Cart] Refused add of out-of-stock item {item.id}")
            return False

        self._lines[item.id] = LineItemDTO(
            item_id=item.id,
            title=item.title,
            author=item.author,
            price=item.price,
            quantity=1,
            stock=catalog_stock
        )
        logger.debug(f"[Cart] Added item {item.id} (stock={catalog_stock})")
        return True

    def increment(self, item_id: str, catalog_stock: int) -> bool:
        """Raise an existing line by one, same ceiling rule as add()."""
        line = self._lines.get(item_id)
        if line is None:
            raise CartItemNotFoundException(item_id)
        return self._bump(line, catalog_stock)

    def _bump(self, line: LineItemDTO, catalog_stock: int) -> bool:
        if line.quantity > catalog_stock:
            # Stock shrank since the line was last touched
            logger.info(f"[Cart] Stock for {line.item_id} dropped to {catalog_stock}, "
                        f"clamping quantity {line.quantity}")
            self.set_quantity(line.item_id, catalog_stock, stock=catalog_stock)
            return True
        if line.quantity == catalog_stock:
            logger.debug(f"[Cart] Item {line.item_id} at stock ceiling ({catalog_stock}), ignoring")
            return False
        line.stock = catalog_stock
        line.quantity += 1
        return True

    def decrement(self, item_id: str) -> bool:
        """
        Lower a line by one; a line at quantity 1 is removed.

        Returns:
            True if the cart changed, False if the item was not in the cart
        """
        line = self._lines.get(item_id)
        if line is None:
            logger.debug(f"[Cart] Decrement of missing item {item_id} ignored")
            return False

        if line.quantity > 1:
            line.quantity -= 1
        else:
            del self._lines[item_id]
        return True

    def set_quantity(self, item_id: str, quantity: int, stock: int | None = None) -> int:
        """
        Set a line's quantity explicitly, clamped to [0, stock].

        A resulting quantity of 0 removes the line.

        Args:
            item_id: Line to update
            quantity: Requested quantity
            stock: Current stock figure; defaults to the stock recorded on the line

        Returns:
            The quantity actually stored (0 if the line was removed)

        Raises:
            CartItemNotFoundException: If the item is not in the cart
        """
        line = self._lines.get(item_id)
        if line is None:
            raise CartItemNotFoundException(item_id)

        ceiling = line.stock if stock is None else stock
        actual = max(0, min(quantity, ceiling))
        if actual == 0:
            del self._lines[item_id]
            return 0

        line.stock = ceiling
        line.quantity = actual
        if actual != quantity:
            logger.debug(f"[Cart] Quantity for {item_id} clamped from {quantity} to {actual}")
        return actual

    def remove(self, item_id: str) -> bool:
        return self._lines.pop(item_id, None) is not None

    def clear(self) -> None:
        self._lines.clear()

    def remove_ordered(self, items: list[OrderItemDTO]) -> None:
        """
        Take the quantities of a placed order out of the cart.

        Copies added after the order snapshot was taken stay in the cart;
        lines left at 0 are removed.
        """
        for ordered in items:
            line = self._lines.get(ordered.id)
            if line is None:
                continue
            remaining = line.quantity - ordered.quantity
            if remaining > 0:
                line.quantity = remaining
            else:
                del self._lines[ordered.id]

    # Read models

    @property
    def items(self) -> list[LineItemDTO]:
        return list(self._lines.values())

    def get(self, item_id: str) -> LineItemDTO | None:
        return self._lines.get(item_id)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total_quantity(self) -> int:
        """Number of books in the cart, as shown on the cart badge."""
        return sum(line.quantity for line in self._lines.values())

    def to_order_items(self) -> list[OrderItemDTO]:
        """Snapshot of the cart for the order service (id + quantity only)."""
        return [OrderItemDTO(id=line.item_id, quantity=line.quantity) for line in self._lines.values()]

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._lines
