"""JSON-file-backed content collections.

Each collection is one JSON array on disk. Every write rewrites the whole
file. Mutations of a collection go through `_mutate`, which holds that
collection's lock across the read-modify-write so concurrent requests
cannot clobber each other's updates.
"""

import json
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from content.models import FeedbackEntry, GalleryImage
from errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

STATES = "states"
CITIES = "cities"
FEEDBACK = "feedback"
COLLECTIONS = (STATES, CITIES, FEEDBACK)


class ContentStore:
    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._locks: Dict[str, threading.RLock] = {
            name: threading.RLock() for name in COLLECTIONS
        }

    # ---- files ----

    def path_for(self, collection: str) -> Path:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return self.data_dir / f"{collection}.json"

    def init_files(self) -> None:
        """Create the data directory and any missing collection file."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            for collection in COLLECTIONS:
                path = self.path_for(collection)
                if not path.exists():
                    path.write_text("[]", encoding="utf-8")
                    logger.info("Created %s", path.name)
        except OSError as exc:
            logger.error("Could not initialize data files in %s", self.data_dir, exc_info=True)
            raise StorageError("Failed to initialize data files") from exc

    def _read(self, collection: str) -> List[dict]:
        path = self.path_for(collection)
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Error reading %s", path, exc_info=True)
            raise StorageError(f"Failed to load {collection} data") from exc
        if not isinstance(data, list):
            logger.error("%s does not hold a JSON array", path)
            raise StorageError(f"Failed to load {collection} data")
        return data

    def _write(self, collection: str, records: List[dict]) -> None:
        path = self.path_for(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            logger.error("Error writing %s", path, exc_info=True)
            raise StorageError(f"Failed to save {collection} data") from exc

    def load(self, collection: str) -> List[dict]:
        with self._locks[collection]:
            return self._read(collection)

    def save(self, collection: str, records: List[dict]) -> None:
        with self._locks[collection]:
            self._write(collection, records)

    @contextmanager
    def _mutate(self, collection: str) -> Iterator[List[dict]]:
        # nothing is written when the block raises
        with self._locks[collection]:
            records = self._read(collection)
            yield records
            self._write(collection, records)

    # ---- reads ----

    def list_states(self) -> List[dict]:
        return self.load(STATES)

    def get_state(self, slug: str) -> dict:
        state = _find(self.load(STATES), slug)
        if state is None:
            raise NotFoundError("State not found")
        cities = [c for c in self.load(CITIES) if c.get("stateSlug") == slug]
        return {**state, "citiesData": cities}

    def list_cities(self) -> List[dict]:
        return self.load(CITIES)

    def get_city(self, slug: str) -> dict:
        city = _find(self.load(CITIES), slug)
        if city is None:
            raise NotFoundError("City not found")
        return city

    def list_feedback(self) -> List[dict]:
        return self.load(FEEDBACK)

    # ---- writes ----

    def replace_fields(self, collection: str, slug: str, patch: dict,
                       allowed_fields: Iterable[str]) -> dict:
        """Overwrite the allowed keys of `patch` on the record with `slug`.

        Keys outside `allowed_fields` are ignored, so `slug` itself can only
        change if a caller explicitly allows it.
        """
        label = "State" if collection == STATES else "City"
        with self._mutate(collection) as records:
            record = _find(records, slug)
            if record is None:
                raise NotFoundError(f"{label} not found")
            changed = [f for f in allowed_fields if f in patch]
            for field in changed:
                record[field] = patch[field]
        logger.info("Updated %s %s: %s", label.lower(), slug, ", ".join(changed) or "no fields")
        return record

    def add_feedback(self, name: str, email: str, message: str) -> dict:
        entry = FeedbackEntry(name=name, email=email, message=message).model_dump()
        with self._mutate(FEEDBACK) as records:
            records.append(entry)
        return entry

    def add_gallery_image(self, city_slug: str, url: str, caption: str = "") -> dict:
        image = GalleryImage(url=url, caption=caption).model_dump()
        with self._mutate(CITIES) as cities:
            city = _find(cities, city_slug)
            if city is None:
                raise NotFoundError("City not found")
            city.setdefault("gallery", []).append(image)
        return image

    @contextmanager
    def edit_city(self, slug: str) -> Iterator[dict]:
        """Yield a city record for in-place edits, saved on exit."""
        with self._mutate(CITIES) as cities:
            city = _find(cities, slug)
            if city is None:
                raise NotFoundError("City not found")
            yield city

    # ---- integrity ----

    def check_references(self) -> List[str]:
        """Describe every state/city reference that resolves to nothing."""
        states = self.load(STATES)
        cities = self.load(CITIES)
        state_slugs = {s.get("slug") for s in states}
        city_slugs = {c.get("slug") for c in cities}
        problems = []

        for city in cities:
            if city.get("stateSlug") not in state_slugs:
                problems.append(
                    f"City {city.get('slug')} has invalid stateSlug: {city.get('stateSlug')}"
                )
        for state in states:
            for city_slug in state.get("cities", []):
                if city_slug not in city_slugs:
                    problems.append(
                        f"State {state.get('slug')} references invalid city: {city_slug}"
                    )
        if len(state_slugs) != len(states):
            problems.append("Duplicate state slugs found")
        if len(city_slugs) != len(cities):
            problems.append("Duplicate city slugs found")
        return problems


def _find(records: List[dict], slug: str):
    for record in records:
        if record.get("slug") == slug:
            return record
    return None
