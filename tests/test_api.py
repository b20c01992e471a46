"""Endpoint tests for the public and admin API."""

import json

from content.store import FEEDBACK

from conftest import ADMIN_PASS


class TestContentEndpoints:
    def test_list_states(self, client):
        response = client.get("/api/states")

        assert response.status_code == 200
        assert [s["slug"] for s in response.json()] == ["assam", "meghalaya"]

    def test_state_embeds_cities(self, client):
        response = client.get("/api/states/meghalaya")

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()["citiesData"]] == ["shillong"]

    def test_unknown_state_is_404(self, client):
        response = client.get("/api/states/kerala")

        assert response.status_code == 404
        assert response.json() == {"error": "State not found"}

    def test_city_lookup(self, client):
        assert client.get("/api/cities").status_code == 200
        assert client.get("/api/cities/guwahati").json()["name"] == "Guwahati"
        assert client.get("/api/cities/kochi").status_code == 404

    def test_storage_failure_is_generic_500(self, client, store):
        store.path_for("states").write_text("[broken")

        response = client.get("/api/states")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to load states data"}

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "Backend running"}


class TestPages:
    def test_pages_are_served(self, client):
        for route, page in (("/", "index"), ("/state", "state"), ("/city", "city"), ("/admin", "admin")):
            response = client.get(route)
            assert response.status_code == 200
            assert page in response.text


class TestFeedback:
    def test_accepts_and_truncates(self, client, store):
        response = client.post("/api/feedback", json={
            "name": "N" * 150,
            "email": "visitor@example.com",
            "message": "M" * 1200,
        })

        assert response.status_code == 200
        assert response.json()["success"] is True
        entry = store.list_feedback()[0]
        assert len(entry["name"]) == 100
        assert len(entry["message"]) == 1000

    def test_email_without_at_is_rejected_and_not_stored(self, client, store):
        response = client.post("/api/feedback", json={
            "name": "Asha", "email": "asha.example.com", "message": "Hi",
        })

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email address"}
        assert json.loads(store.path_for(FEEDBACK).read_text()) == []

    def test_missing_field_is_rejected(self, client):
        response = client.post("/api/feedback", json={"name": "Asha", "email": "a@b.c"})

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required"}

    def test_malformed_body_is_400(self, client):
        response = client.post("/api/feedback", content="not json",
                               headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert "error" in response.json()


class TestAdminLogin:
    def test_correct_password(self, client):
        response = client.post("/api/admin/login", json={"password": ADMIN_PASS})

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_wrong_password(self, client):
        response = client.post("/api/admin/login", json={"password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid password"}

    def test_missing_password(self, client):
        assert client.post("/api/admin/login", json={}).status_code == 401


class TestAdminUpdates:
    def test_update_state_merges_allowed_fields(self, client, store):
        response = client.post("/api/admin/update/state", json={
            "password": ADMIN_PASS,
            "stateData": {"slug": "assam", "description": "Updated", "secret": "x", "id": 99},
        })

        assert response.status_code == 200
        state = store.get_state("assam")
        assert state["description"] == "Updated"
        assert "secret" not in state
        assert state["id"] == 1
        assert state["history"] == "Ahom kingdom"

    def test_update_city(self, client, store):
        response = client.post("/api/admin/update/city", json={
            "password": ADMIN_PASS,
            "cityData": {"slug": "shillong", "localSpecialties": ["Jadoh"], "stateSlug": "assam"},
        })

        assert response.status_code == 200
        city = store.get_city("shillong")
        assert city["localSpecialties"] == ["Jadoh"]
        assert city["stateSlug"] == "meghalaya"

    def test_bad_password_wins_over_bad_body(self, client):
        response = client.post("/api/admin/update/state", json={"password": "nope"})

        assert response.status_code == 401

    def test_missing_slug_is_400(self, client):
        response = client.post("/api/admin/update/city", json={
            "password": ADMIN_PASS, "cityData": {"name": "X"},
        })

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid city data"}

    def test_unknown_slug_is_404(self, client):
        response = client.post("/api/admin/update/state", json={
            "password": ADMIN_PASS, "stateData": {"slug": "kerala", "name": "Kerala"},
        })

        assert response.status_code == 404


class TestAdminFeedback:
    def test_returns_all_feedback(self, client, store):
        store.add_feedback("Asha", "asha@example.com", "Hello")

        response = client.post("/api/admin/feedback", json={"password": ADMIN_PASS})

        assert response.status_code == 200
        assert [f["name"] for f in response.json()] == ["Asha"]

    def test_requires_password(self, client):
        assert client.post("/api/admin/feedback", json={"password": "x"}).status_code == 401

    def test_export_xlsx(self, client, store):
        store.add_feedback("Asha", "asha@example.com", "Hello")

        response = client.post("/api/admin/feedback/export", json={"password": ADMIN_PASS})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert response.content[:2] == b"PK"

    def test_export_with_no_feedback(self, client):
        response = client.post("/api/admin/feedback/export", json={"password": ADMIN_PASS})

        assert response.json() == {"message": "No feedback to export"}
