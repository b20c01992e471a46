import pytest
from fastapi.testclient import TestClient

from content.store import CITIES, STATES
from database import store_for
from main import app
from settings import Settings, get_settings

ADMIN_PASS = "test-secret"

SAMPLE_STATES = [
    {
        "id": 1,
        "slug": "assam",
        "name": "Assam",
        "description": "Tea gardens and rhinos",
        "history": "Ahom kingdom",
        "highlights": ["Kaziranga"],
        "festivals": ["Bihu"],
        "coords": {"lat": 26.2, "lng": 92.9},
        "cities": ["guwahati"],
    },
    {
        "id": 2,
        "slug": "meghalaya",
        "name": "Meghalaya",
        "description": "Abode of clouds",
        "coords": {"lat": 25.5, "lng": 91.4},
        "cities": ["shillong"],
    },
]

SAMPLE_CITIES = [
    {
        "id": 1,
        "slug": "guwahati",
        "name": "Guwahati",
        "stateSlug": "assam",
        "summary": "Gateway to the northeast",
        "coords": {"lat": 26.1, "lng": 91.7},
        "gallery": [
            {"id": "img-1", "url": "/uploads/one.jpg", "caption": "River", "moderated": True,
             "uploadedAt": "2024-01-01T00:00:00+00:00"},
            {"id": "img-2", "url": "/uploads/two.jpg", "caption": "Temple", "moderated": True,
             "uploadedAt": "2024-01-02T00:00:00+00:00"},
            {"id": "img-3", "url": "/uploads/three.jpg", "caption": "Market", "moderated": False,
             "uploadedAt": "2024-01-03T00:00:00+00:00"},
        ],
    },
    {
        "id": 2,
        "slug": "shillong",
        "name": "Shillong",
        "stateSlug": "meghalaya",
        "summary": "Scotland of the east",
        "coords": {"lat": 25.6, "lng": 91.9},
    },
]


@pytest.fixture
def settings(tmp_path):
    web_dir = tmp_path / "web"
    upload_dir = web_dir / "uploads"
    upload_dir.mkdir(parents=True)
    for page in ("index", "state", "city", "admin"):
        (web_dir / f"{page}.html").write_text(f"<html><body>{page}</body></html>")
    for name in ("one.jpg", "two.jpg", "three.jpg"):
        (upload_dir / name).write_bytes(b"fake image")

    return Settings(
        admin_pass=ADMIN_PASS,
        data_dir=tmp_path / "data",
        web_dir=web_dir,
        upload_dir=upload_dir,
    )


@pytest.fixture
def store(settings):
    store = store_for(settings.data_dir)
    store.init_files()
    store.save(STATES, [dict(s) for s in SAMPLE_STATES])
    store.save(CITIES, [dict(c) for c in SAMPLE_CITIES])
    return store


@pytest.fixture
def client(settings, store):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
