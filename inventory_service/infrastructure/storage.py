"""File storage utilities"""
import time
from pathlib import Path
from typing import Optional
from fastapi import UploadFile


def ensure_cache_dir(cache_dir: Path) -> Path:
    """Ensure cache directory exists"""
    cache_dir = Path(cache_dir)
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


def generate_photo_filename(original_name: str, now: Optional[float] = None) -> str:
    """Timestamp-prefixed name for an uploaded file

    Only the basename of the client-supplied name is kept.
    """
    if now is None:
        now = time.time()
    base_name = Path(original_name.replace("\\", "/")).name or "upload"
    return f"{int(now * 1000)}-{base_name}"


async def save_uploaded_file(file: UploadFile, cache_dir: Path) -> str:
    """Save uploaded file into the cache directory and return its stored name"""
    if not file.filename:
        raise ValueError("Filename is required")

    upload_dir = ensure_cache_dir(cache_dir)
    filename = generate_photo_filename(file.filename)
    contents = await file.read()

    with open(upload_dir / filename, "wb") as f:
        f.write(contents)

    return filename


def resolve_photo_path(cache_dir: Path, filename: str) -> Optional[Path]:
    """Path of a stored photo, or None if the file is not on disk"""
    full_path = Path(cache_dir) / Path(filename).name
    if not full_path.is_file():
        return None
    return full_path
