"""Inventory DTOs"""
from typing import Optional
from pydantic import BaseModel


class InventoryItemUpdateDTO(BaseModel):
    """DTO for updating an inventory item"""
    name: Optional[str] = None
    description: Optional[str] = None


class InventoryItemDTO(BaseModel):
    """Stored inventory record"""
    id: int
    name: str
    description: str = ""
    photo: Optional[str] = None

    model_config = {"from_attributes": True}


class InventoryItemViewDTO(BaseModel):
    """Public view of an inventory item; photo_url only set when a photo is stored"""
    id: int
    name: str
    description: str = ""
    photo_url: Optional[str] = None


class InventoryItemMessageDTO(BaseModel):
    """Mutation result carrying the affected item"""
    message: str
    item: InventoryItemDTO


class MessageDTO(BaseModel):
    message: str


class ErrorDTO(BaseModel):
    error: str
