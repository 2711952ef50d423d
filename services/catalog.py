import logging
from datetime import datetime

from enums.message_entity import MessageEntity
from exceptions.api import ApiRequestException
from exceptions.catalog import CatalogFetchFailedException
from models.catalog_item import CatalogItemDTO
from repositories.catalog import CatalogRepository
from utils.error_handler import handle_service_error

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Catalog Snapshot Provider.

    Holds the most recently fetched set of books. The snapshot is read-only
    and replaced wholesale by refresh(); a failed refresh keeps the previous
    snapshot (empty before the first success) and is never retried
    automatically.
    """

    def __init__(self, entity: MessageEntity = MessageEntity.USER) -> None:
        self.entity = entity
        self._items: tuple[CatalogItemDTO, ...] = ()
        self._by_id: dict[str, CatalogItemDTO] = {}
        self.fetched_at: datetime | None = None
        self.last_error: str | None = None

    async def refresh(self) -> bool:
        """
        Fetch the catalog from the inventory service.

        Returns:
            True if the snapshot was replaced, False if the fetch failed
            (the user-facing reason is left in last_error)
        """
        try:
            items = await CatalogRepository.get_all()
        except ApiRequestException as e:
            error = CatalogFetchFailedException(reason=str(e))
            logger.error(f"[Catalog] Refresh failed, keeping {len(self._items)} cached items: {e}")
            self.last_error = handle_service_error(error, self.entity)
            return False

        self._items = tuple(items)
        self._by_id = {item.id: item for item in items}
        self.fetched_at = datetime.now()
        self.last_error = None
        logger.info(f"[Catalog] Snapshot refreshed: {len(items)} items")
        return True

    @property
    def items(self) -> tuple[CatalogItemDTO, ...]:
        return self._items

    def get(self, item_id: str) -> CatalogItemDTO | None:
        return self._by_id.get(item_id)

    def stock_of(self, item_id: str) -> int:
        """Stock figure from the snapshot; unknown items count as out of stock."""
        item = self._by_id.get(item_id)
        return item.stock if item else 0

    def search(self, term: str) -> list[CatalogItemDTO]:
        """Case-insensitive match on title or author; a blank term returns everything."""
        needle = term.strip().lower()
        if not needle:
            return list(self._items)
        return [
            item for item in self._items
            if needle in item.title.lower() or needle in item.author.lower()
        ]
