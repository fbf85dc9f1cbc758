"""API dependencies"""
from typing import Optional
from fastapi import Depends, File, Request, UploadFile
from inventory_service.application.use_cases.inventory_use_cases import InventoryUseCases
from inventory_service.domain.exceptions import ItemNotFoundError
from inventory_service.infrastructure.config.settings import Settings
from inventory_service.infrastructure.repositories.inventory_repository_json import JsonInventoryRepository
from inventory_service.infrastructure.storage import save_uploaded_file


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with"""
    return request.app.state.settings


def get_inventory_repository(request: Request) -> JsonInventoryRepository:
    """The app's single inventory store"""
    return request.app.state.inventory_repository


def get_inventory_use_cases(
    repository: JsonInventoryRepository = Depends(get_inventory_repository),
    settings: Settings = Depends(get_settings),
) -> InventoryUseCases:
    """Get inventory use cases bound to the app's store"""
    return InventoryUseCases(repository, settings.cache_path)


def get_item_id(item_id: str) -> int:
    """Path id; anything that is not a positive integer cannot name an item"""
    try:
        value = int(item_id)
    except ValueError:
        raise ItemNotFoundError()
    if value < 1:
        raise ItemNotFoundError()
    return value


async def get_uploaded_photo(
    photo: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
) -> Optional[str]:
    """
    Write the multipart "photo" part to the cache directory

    Runs before the route body, which only ever sees the stored filename.

    Returns:
        Stored filename, or None if no file was sent
    """
    if photo is None or not photo.filename:
        return None
    return await save_uploaded_file(photo, settings.cache_path)
