"""Inventory API router"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Form, status
from fastapi.responses import FileResponse
from inventory_service.application.dto.inventory_dto import (
    ErrorDTO,
    InventoryItemMessageDTO,
    InventoryItemUpdateDTO,
    InventoryItemViewDTO,
    MessageDTO,
)
from inventory_service.application.use_cases.inventory_use_cases import (
    InventoryUseCases,
    parse_flag,
    parse_item_id,
)
from inventory_service.presentation.api.dependencies import (
    get_inventory_use_cases,
    get_item_id,
    get_uploaded_photo,
)

router = APIRouter(tags=["inventory"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorDTO}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorDTO}}


@router.post(
    "/register",
    response_model=InventoryItemMessageDTO,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def register_inventory_item(
    inventory_name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    photo: Optional[str] = Depends(get_uploaded_photo),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Register a new inventory item with an optional photo"""
    item = await use_cases.register_item(inventory_name, description, photo)
    return InventoryItemMessageDTO(message="Item created", item=item)


@router.get(
    "/inventory",
    response_model=List[InventoryItemViewDTO],
    response_model_exclude_none=True,
)
async def get_all_inventory_items(
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Get all inventory items"""
    return await use_cases.list_items()


@router.get(
    "/inventory/{item_id}",
    response_model=InventoryItemViewDTO,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def get_inventory_item(
    item_id: int = Depends(get_item_id),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Get inventory item by ID"""
    return await use_cases.get_item(item_id)


@router.put(
    "/inventory/{item_id}",
    response_model=InventoryItemMessageDTO,
    responses=NOT_FOUND,
)
async def update_inventory_item(
    item_id: int = Depends(get_item_id),
    item_data: Optional[InventoryItemUpdateDTO] = Body(None),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Update item's name or description"""
    item = await use_cases.update_item(item_id, item_data)
    return InventoryItemMessageDTO(message="Item updated", item=item)


@router.get(
    "/inventory/{item_id}/photo",
    response_class=FileResponse,
    responses={
        status.HTTP_200_OK: {"content": {"image/jpeg": {}}},
        **NOT_FOUND,
    },
)
async def get_inventory_item_photo(
    item_id: int = Depends(get_item_id),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Get item photo"""
    photo_path = await use_cases.get_photo_path(item_id)
    return FileResponse(photo_path, media_type="image/jpeg")


@router.put(
    "/inventory/{item_id}/photo",
    response_model=InventoryItemMessageDTO,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def update_inventory_item_photo(
    item_id: int = Depends(get_item_id),
    photo: Optional[str] = Depends(get_uploaded_photo),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Update item photo"""
    item = await use_cases.replace_photo(item_id, photo)
    return InventoryItemMessageDTO(message="Photo updated", item=item)


@router.delete(
    "/inventory/{item_id}",
    response_model=MessageDTO,
    responses=NOT_FOUND,
)
async def delete_inventory_item(
    item_id: int = Depends(get_item_id),
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Delete inventory item"""
    await use_cases.delete_item(item_id)
    return MessageDTO(message="Item deleted")


@router.get(
    "/search",
    response_model=InventoryItemViewDTO,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, **NOT_FOUND},
    tags=["search"],
)
async def search_inventory_item(
    id: Optional[str] = None,
    includePhoto: Optional[str] = None,
    use_cases: InventoryUseCases = Depends(get_inventory_use_cases),
):
    """Search item by ID; photo_url is added only when includePhoto is set"""
    item_id = parse_item_id(id)
    return await use_cases.search_item(item_id, include_photo=parse_flag(includePhoto))
