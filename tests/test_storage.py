import asyncio
import io
from fastapi import UploadFile
from inventory_service.infrastructure.storage import (
    generate_photo_filename,
    resolve_photo_path,
    save_uploaded_file,
)


def test_generated_name_has_millisecond_prefix():
    assert generate_photo_filename("cat.jpg", now=1700000000.123) == "1700000000123-cat.jpg"


def test_generated_name_drops_directories():
    assert generate_photo_filename("../../etc/passwd", now=1.0) == "1000-passwd"
    assert generate_photo_filename("C:\\photos\\dog.png", now=1.0) == "1000-dog.png"


def test_save_uploaded_file_writes_bytes(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"\xff\xd8jpeg-bytes"), filename="box.jpg")
    filename = asyncio.run(save_uploaded_file(upload, tmp_path / "cache"))

    assert filename.endswith("-box.jpg")
    assert (tmp_path / "cache" / filename).read_bytes() == b"\xff\xd8jpeg-bytes"


def test_resolve_photo_path(tmp_path):
    (tmp_path / "1-a.jpg").write_bytes(b"x")
    assert resolve_photo_path(tmp_path, "1-a.jpg") == tmp_path / "1-a.jpg"
    assert resolve_photo_path(tmp_path, "2-b.jpg") is None
