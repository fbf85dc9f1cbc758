"""HTML form pages"""
from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter(tags=["forms"])


@router.get("/RegisterForm.html", response_class=FileResponse)
async def register_form():
    """Registration HTML form"""
    return FileResponse(STATIC_DIR / "RegisterForm.html", media_type="text/html")


@router.get("/SearchForm.html", response_class=FileResponse)
async def search_form():
    """Search HTML form"""
    return FileResponse(STATIC_DIR / "SearchForm.html", media_type="text/html")
