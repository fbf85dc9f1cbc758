"""Inventory domain entity"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class InventoryItem:
    """Inventory item domain entity"""
    id: int
    name: str
    description: str = ""
    photo: Optional[str] = None

    @property
    def photo_url(self) -> Optional[str]:
        """Public URL of the item photo, if one is stored"""
        if not self.photo:
            return None
        return f"/inventory/{self.id}/photo"

    def to_record(self) -> Dict[str, Any]:
        """Plain dict as written to the JSON store"""
        return asdict(self)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "InventoryItem":
        """Build an item from a stored record

        Raises ValueError if the record has no usable integer id.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Record must be an object, got {type(record).__name__}")
        item_id = record.get("id")
        if isinstance(item_id, bool) or not isinstance(item_id, int) or item_id < 1:
            raise ValueError(f"Record has invalid id: {item_id!r}")
        return cls(
            id=item_id,
            name=str(record.get("name") or ""),
            description=str(record.get("description") or ""),
            photo=record.get("photo") or None,
        )
