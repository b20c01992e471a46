"""Lifecycle of uploaded gallery images.

    pending --approve--> approved
    pending --reject-->  deleted (entry removed, file unlinked best-effort)
"""

import logging
from pathlib import Path
from typing import List

from content.store import ContentStore
from errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

APPROVE = "approve"
REJECT = "reject"
ACTIONS = (APPROVE, REJECT)

UPLOAD_URL_PREFIX = "/uploads/"


class ModerationWorkflow:
    def __init__(self, store: ContentStore, upload_dir: Path):
        self.store = store
        self.upload_dir = Path(upload_dir)

    def moderate(self, city_slug: str, image_id: str, action: str) -> List[dict]:
        """Apply `action` and return the city's gallery afterwards."""
        if action == APPROVE:
            return self.approve(city_slug, image_id)
        if action == REJECT:
            return self.reject(city_slug, image_id)
        raise ValidationError("Invalid action")

    def approve(self, city_slug: str, image_id: str) -> List[dict]:
        with self.store.edit_city(city_slug) as city:
            gallery = city.get("gallery") or []
            image = gallery[_index_of(gallery, image_id)]
            image["moderated"] = True
        logger.info("Approved image %s in %s", image_id, city_slug)
        return gallery

    def reject(self, city_slug: str, image_id: str) -> List[dict]:
        with self.store.edit_city(city_slug) as city:
            gallery = city.get("gallery") or []
            removed = gallery.pop(_index_of(gallery, image_id))
            city["gallery"] = gallery
        logger.info("Rejected image %s in %s", image_id, city_slug)
        self._delete_file(removed.get("url", ""))
        return gallery

    def pending_images(self) -> List[dict]:
        pending = []
        for city in self.store.list_cities():
            for image in city.get("gallery") or []:
                if image.get("moderated") is False:
                    pending.append({**image, "citySlug": city.get("slug"), "cityName": city.get("name")})
        return pending

    def _delete_file(self, url: str) -> None:
        # failures leave an orphaned file behind; the entry stays removed
        if not url.startswith(UPLOAD_URL_PREFIX):
            logger.warning("Not deleting %r: not an uploaded file", url)
            return
        upload_root = self.upload_dir.resolve()
        path = (upload_root / url[len(UPLOAD_URL_PREFIX):]).resolve()
        if path.parent != upload_root:
            logger.warning("Not deleting %r: outside the upload directory", url)
            return
        try:
            path.unlink()
        except OSError:
            logger.error("Failed to delete image file %s", path.name, exc_info=True)


def _index_of(gallery: List[dict], image_id: str) -> int:
    for index, image in enumerate(gallery):
        if image.get("id") == image_id:
            return index
    raise NotFoundError("Image not found")
