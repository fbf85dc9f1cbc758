"""Inventory repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional
from inventory_service.domain.entities.inventory import InventoryItem


class InventoryRepository(ABC):
    """Interface for inventory repository"""

    @abstractmethod
    async def create(self, name: str, description: str = "", photo: Optional[str] = None) -> InventoryItem:
        """Create a new inventory item with the next free id"""
        pass

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[InventoryItem]:
        """Get inventory item by ID"""
        pass

    @abstractmethod
    async def get_all(self) -> List[InventoryItem]:
        """Get all inventory items in insertion order"""
        pass

    @abstractmethod
    async def update(self, item: InventoryItem) -> InventoryItem:
        """Update inventory item"""
        pass

    @abstractmethod
    async def delete(self, item_id: int) -> bool:
        """Delete inventory item"""
        pass
