"""Inventory use cases"""
from pathlib import Path
from typing import List, Optional
from inventory_service.domain.entities.inventory import InventoryItem
from inventory_service.domain.exceptions import (
    ItemNotFoundError,
    PhotoNotFoundError,
    ValidationError,
)
from inventory_service.domain.repositories.inventory_repository import InventoryRepository
from inventory_service.application.dto.inventory_dto import (
    InventoryItemDTO,
    InventoryItemUpdateDTO,
    InventoryItemViewDTO,
)
from inventory_service.infrastructure.logging_config import get_logger
from inventory_service.infrastructure.storage import resolve_photo_path

logger = get_logger(__name__)

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def parse_item_id(value: Optional[str]) -> int:
    """Parse a client-supplied id, raising ValidationError if it is not a positive integer"""
    if value is None or not value.strip():
        raise ValidationError("Invalid id")
    try:
        item_id = int(value.strip())
    except ValueError:
        raise ValidationError("Invalid id")
    if item_id < 1:
        raise ValidationError("Invalid id")
    return item_id


def parse_flag(value: Optional[str]) -> bool:
    """Interpret a query flag such as includePhoto"""
    return value is not None and value.strip().lower() in TRUTHY_VALUES


class InventoryUseCases:
    """Use cases for inventory operations"""

    def __init__(self, inventory_repository: InventoryRepository, cache_dir: Path):
        self.inventory_repository = inventory_repository
        self.cache_dir = Path(cache_dir)

    async def register_item(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        photo: Optional[str] = None,
    ) -> InventoryItemDTO:
        """Register a new inventory item"""
        if not name or not name.strip():
            raise ValidationError("Inventory name is required")

        item = await self.inventory_repository.create(
            name=name,
            description=description or "",
            photo=photo,
        )
        logger.info(f"Registered item {item.id}")
        return self._item_to_dto(item)

    async def list_items(self) -> List[InventoryItemViewDTO]:
        """All items in insertion order"""
        items = await self.inventory_repository.get_all()
        return [self._item_to_view(item) for item in items]

    async def get_item(self, item_id: int) -> InventoryItemViewDTO:
        item = await self._require_item(item_id)
        return self._item_to_view(item)

    async def update_item(self, item_id: int, item_data: Optional[InventoryItemUpdateDTO]) -> InventoryItemDTO:
        """Update name and description; empty values leave the field unchanged"""
        item = await self._require_item(item_id)

        if item_data is not None:
            # Update only provided fields
            if item_data.name and item_data.name.strip():
                item.name = item_data.name
            if item_data.description:
                item.description = item_data.description

        updated_item = await self.inventory_repository.update(item)
        logger.info(f"Updated item {item_id}")
        return self._item_to_dto(updated_item)

    async def get_photo_path(self, item_id: int) -> Path:
        """On-disk path of the item's photo"""
        item = await self.inventory_repository.get_by_id(item_id)
        if item is None or not item.photo:
            raise PhotoNotFoundError()

        photo_path = resolve_photo_path(self.cache_dir, item.photo)
        if photo_path is None:
            logger.warning(f"Photo file {item.photo} of item {item_id} is missing from {self.cache_dir}")
            raise PhotoNotFoundError()
        return photo_path

    async def replace_photo(self, item_id: int, photo: Optional[str]) -> InventoryItemDTO:
        """Point the item at a newly uploaded photo; the old file stays on disk"""
        if not photo:
            raise ValidationError("Photo file is required")

        item = await self._require_item(item_id)
        item.photo = photo
        updated_item = await self.inventory_repository.update(item)
        logger.info(f"Replaced photo of item {item_id}")
        return self._item_to_dto(updated_item)

    async def delete_item(self, item_id: int) -> None:
        """Delete inventory item; its photo file is left in place"""
        deleted = await self.inventory_repository.delete(item_id)
        if not deleted:
            raise ItemNotFoundError()
        logger.info(f"Deleted item {item_id}")

    async def search_item(self, item_id: int, include_photo: bool = False) -> InventoryItemViewDTO:
        """Like get_item, but photo_url is only set when asked for"""
        item = await self._require_item(item_id)
        view = self._item_to_view(item)
        if not include_photo:
            view.photo_url = None
        return view

    async def _require_item(self, item_id: int) -> InventoryItem:
        item = await self.inventory_repository.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError()
        return item

    def _item_to_dto(self, item: InventoryItem) -> InventoryItemDTO:
        """Convert InventoryItem entity to InventoryItemDTO"""
        return InventoryItemDTO.model_validate(item)

    def _item_to_view(self, item: InventoryItem) -> InventoryItemViewDTO:
        """Convert InventoryItem entity to InventoryItemViewDTO"""
        return InventoryItemViewDTO(
            id=item.id,
            name=item.name,
            description=item.description,
            photo_url=item.photo_url,
        )
