"""JSON-file implementation of InventoryRepository"""
import json
from pathlib import Path
from typing import List, Optional
from inventory_service.domain.entities.inventory import InventoryItem
from inventory_service.domain.repositories.inventory_repository import InventoryRepository
from inventory_service.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


class JsonInventoryRepository(InventoryRepository):
    """In-memory inventory mirrored to a JSON file

    The whole collection is rewritten after every mutation (last write wins).
    Read and write failures are logged and never raised to the caller.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._items: List[InventoryItem] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> int:
        """Seed the collection from the JSON file, returning the item count"""
        self._items = []
        self._next_id = 1

        if not self.path.exists():
            logger.info(f"No inventory file at {self.path}, starting empty")
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read inventory file {self.path}: {e}")
            return 0

        if not isinstance(records, list):
            logger.warning(f"Inventory file {self.path} does not hold a JSON array, starting empty")
            return 0

        seen_ids = set()
        for record in records:
            try:
                item = InventoryItem.from_record(record)
            except ValueError as e:
                logger.warning(f"Skipping inventory record: {e}")
                continue
            if item.id in seen_ids:
                logger.warning(f"Skipping inventory record with duplicate id {item.id}")
                continue
            seen_ids.add(item.id)
            self._items.append(item)

        self._next_id = max((item.id for item in self._items), default=0) + 1
        logger.info(f"Loaded {len(self._items)} items from {self.path}, next id {self._next_id}")
        return len(self._items)

    def save(self) -> bool:
        """Snapshot the whole collection to the JSON file"""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([item.to_record() for item in self._items], f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to write inventory file {self.path}: {e}")
            return False
        return True

    async def create(self, name: str, description: str = "", photo: Optional[str] = None) -> InventoryItem:
        """Create a new inventory item"""
        item = InventoryItem(id=self._next_id, name=name, description=description, photo=photo)
        self._next_id += 1
        self._items.append(item)
        self.save()
        return item

    async def get_by_id(self, item_id: int) -> Optional[InventoryItem]:
        """Get inventory item by ID"""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    async def get_all(self) -> List[InventoryItem]:
        """Get all inventory items"""
        return list(self._items)

    async def update(self, item: InventoryItem) -> InventoryItem:
        """Update inventory item"""
        for index, existing in enumerate(self._items):
            if existing.id == item.id:
                self._items[index] = item
                self.save()
                return item
        raise ValueError(f"Inventory item with ID '{item.id}' not found")

    async def delete(self, item_id: int) -> bool:
        """Delete inventory item"""
        for index, existing in enumerate(self._items):
            if existing.id == item_id:
                del self._items[index]
                self.save()
                return True
        return False
