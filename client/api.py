"""HTTP client for the Discover NorthEast API.

GETs are served from a `ResponseCache`; every admin mutation clears it.
Requests are never retried: failures raise `ApiError` for the caller to show.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional

import requests

from client.cache import ResponseCache

logger = logging.getLogger(__name__)

TIMEOUT = 15


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class AdminSession:
    password: str


class DiscoverClient:
    def __init__(self, base_url: str = "http://localhost:3000",
                 session: Optional[requests.Session] = None,
                 cache: Optional[ResponseCache] = None):
        self.api_base = base_url.rstrip("/") + "/api"
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else ResponseCache()
        self.admin: Optional[AdminSession] = None

    # ---- transport ----

    def _request(self, method: str, path: str, fallback: str, **kwargs) -> Any:
        url = f"{self.api_base}{path}"
        try:
            res = self.session.request(method, url, timeout=TIMEOUT, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(fallback) from exc

        if not res.ok:
            try:
                message = res.json().get("error") or fallback
            except ValueError:
                message = fallback
            raise ApiError(message, status=res.status_code)

        return res.json()

    def _get_cached(self, path: str, **options) -> Any:
        key = f"{path}-{json.dumps(options, sort_keys=True)}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        data = self._request("GET", path, f"HTTP error loading {path}", **options)
        self.cache.set(key, data)
        return data

    def _admin_post(self, path: str, fallback: str, **payload) -> Any:
        if self.admin is None:
            raise ApiError("Not logged in", status=401)
        return self._request("POST", path, fallback, json={"password": self.admin.password, **payload})

    # ---- public content ----

    def get_all_states(self):
        return self._get_cached("/states")

    def get_state(self, slug: str):
        return self._get_cached(f"/states/{slug}")

    def get_all_cities(self):
        return self._get_cached("/cities")

    def get_city(self, slug: str):
        return self._get_cached(f"/cities/{slug}")

    def submit_feedback(self, name: str, email: str, message: str):
        return self._request(
            "POST", "/feedback", "Failed to submit feedback",
            json={"name": name, "email": email, "message": message},
        )

    def upload_image(self, city_slug: str, file: BinaryIO, filename: str,
                     caption: str = "", content_type: str = "image/jpeg"):
        return self._request(
            "POST", "/upload", "Failed to upload image",
            files={"photo": (filename, file, content_type)},
            data={"citySlug": city_slug, "caption": caption},
        )

    # ---- admin ----

    def admin_login(self, password: str):
        result = self._request("POST", "/admin/login", "Invalid password", json={"password": password})
        self.admin = AdminSession(password)
        return result

    def logout(self) -> None:
        self.admin = None

    def update_state(self, state_data: dict):
        result = self._admin_post("/admin/update/state", "Failed to update state", stateData=state_data)
        self.cache.clear()
        return result

    def update_city(self, city_data: dict):
        result = self._admin_post("/admin/update/city", "Failed to update city", cityData=city_data)
        self.cache.clear()
        return result

    def moderate_image(self, city_slug: str, image_id: str, action: str):
        result = self._admin_post(
            "/admin/moderate", "Failed to moderate image",
            citySlug=city_slug, imageId=image_id, action=action,
        )
        self.cache.clear()
        return result

    def get_feedback(self):
        return self._admin_post("/admin/feedback", "Failed to get feedback")

    def get_pending_images(self):
        return self._admin_post("/admin/pending", "Failed to load moderation queue")
