import logging
import os
import random
import re
import time
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from content.models import CAPTION_LIMIT
from content.store import ContentStore
from database import get_store
from errors import NotFoundError, StorageError, ValidationError
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Gallery"])

ALLOWED_EXTENSIONS = re.compile(r"\.(jpe?g|png|gif|webp)")
ALLOWED_CONTENT_TYPES = re.compile(r"image/(jpeg|png|gif|webp)")


def is_allowed_image(filename: str, content_type: Optional[str]) -> bool:
    ext = os.path.splitext(filename or "")[1].lower()
    return bool(
        ALLOWED_EXTENSIONS.fullmatch(ext)
        and ALLOWED_CONTENT_TYPES.fullmatch((content_type or "").lower())
    )


def unique_filename(original: str) -> str:
    ext = os.path.splitext(original)[1].lower()
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


@router.post("/upload")
def upload_photo(
    photo: Optional[UploadFile] = File(None),
    citySlug: Optional[str] = Form(None),
    caption: str = Form(""),
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    if photo is None or not photo.filename:
        raise ValidationError("No file uploaded")

    if not is_allowed_image(photo.filename, photo.content_type):
        raise ValidationError("Only image files are allowed")

    limit = settings.max_upload_bytes
    contents = photo.file.read(limit + 1)
    if len(contents) > limit:
        raise ValidationError(f"File too large. Maximum size is {settings.max_upload_mb}MB")

    if not citySlug:
        raise ValidationError("City slug is required")

    # resolve the city first so a 404 leaves nothing behind on disk
    store.get_city(citySlug)

    filename = unique_filename(photo.filename)
    path = settings.upload_dir / filename
    try:
        settings.upload_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(contents)
    except OSError as exc:
        logger.error("Could not store upload %s", filename, exc_info=True)
        raise StorageError("Upload failed") from exc

    try:
        image = store.add_gallery_image(citySlug, f"/uploads/{filename}", caption[:CAPTION_LIMIT])
    except (NotFoundError, StorageError):
        path.unlink(missing_ok=True)
        raise

    logger.info("Uploaded %s for %s (pending moderation)", filename, citySlug)
    return {"success": True, "message": "Image uploaded successfully", "image": image}
