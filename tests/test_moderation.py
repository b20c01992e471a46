"""Tests for the gallery moderation workflow and its endpoint."""

import logging

import pytest

from errors import NotFoundError, ValidationError
from moderation.workflow import ModerationWorkflow

from conftest import ADMIN_PASS


@pytest.fixture
def workflow(store, settings):
    return ModerationWorkflow(store, settings.upload_dir)


class TestWorkflow:
    def test_approve_marks_moderated(self, workflow, store):
        gallery = workflow.approve("guwahati", "img-3")

        assert all(img["moderated"] for img in gallery)
        assert store.get_city("guwahati")["gallery"][2]["moderated"] is True

    def test_reject_removes_entry_and_file(self, workflow, store, settings):
        gallery = workflow.reject("guwahati", "img-3")

        assert [img["id"] for img in gallery] == ["img-1", "img-2"]
        assert len(store.get_city("guwahati")["gallery"]) == 2
        assert not (settings.upload_dir / "three.jpg").exists()
        assert (settings.upload_dir / "one.jpg").exists()

    def test_reject_deletes_the_rejected_file_not_its_neighbour(self, workflow, settings):
        workflow.reject("guwahati", "img-1")

        assert not (settings.upload_dir / "one.jpg").exists()
        assert (settings.upload_dir / "two.jpg").exists()

    def test_reject_survives_missing_file(self, workflow, store, settings, caplog):
        (settings.upload_dir / "three.jpg").unlink()

        with caplog.at_level(logging.ERROR):
            gallery = workflow.reject("guwahati", "img-3")

        assert len(gallery) == 2
        assert "Failed to delete image file" in caplog.text

    def test_reject_never_deletes_outside_uploads(self, workflow, store, tmp_path):
        outside = tmp_path / "keep.txt"
        outside.write_text("keep")
        store.add_gallery_image("shillong", "/uploads/../../keep.txt")
        image_id = store.get_city("shillong")["gallery"][0]["id"]

        workflow.reject("shillong", image_id)

        assert outside.exists()
        assert store.get_city("shillong")["gallery"] == []

    def test_unknown_image_has_no_side_effect(self, workflow, store):
        before = store.path_for("cities").read_text()

        with pytest.raises(NotFoundError, match="Image not found"):
            workflow.reject("guwahati", "img-404")
        with pytest.raises(NotFoundError, match="City not found"):
            workflow.approve("kochi", "img-1")

        assert store.path_for("cities").read_text() == before

    def test_invalid_action(self, workflow):
        with pytest.raises(ValidationError):
            workflow.moderate("guwahati", "img-3", "publish")

    def test_pending_images(self, workflow):
        pending = workflow.pending_images()

        assert len(pending) == 1
        assert pending[0]["id"] == "img-3"
        assert pending[0]["citySlug"] == "guwahati"
        assert pending[0]["cityName"] == "Guwahati"


class TestModerateEndpoint:
    def test_reject_shrinks_gallery_by_one(self, client):
        response = client.post("/api/admin/moderate", json={
            "password": ADMIN_PASS, "citySlug": "guwahati", "imageId": "img-3", "action": "reject",
        })

        assert response.status_code == 200
        assert response.json()["message"] == "Image rejected successfully"
        assert len(response.json()["gallery"]) == 2

        city = client.get("/api/cities/guwahati").json()
        assert "img-3" not in [img["id"] for img in city["gallery"]]

    def test_approve(self, client):
        response = client.post("/api/admin/moderate", json={
            "password": ADMIN_PASS, "citySlug": "guwahati", "imageId": "img-3", "action": "approve",
        })

        assert response.status_code == 200
        assert response.json()["message"] == "Image approved successfully"

    def test_requires_password(self, client):
        response = client.post("/api/admin/moderate", json={
            "password": "nope", "citySlug": "guwahati", "imageId": "img-3", "action": "reject",
        })

        assert response.status_code == 401

    def test_missing_parameters(self, client):
        response = client.post("/api/admin/moderate", json={"password": ADMIN_PASS, "citySlug": "guwahati"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters"}

    def test_unknown_image(self, client):
        response = client.post("/api/admin/moderate", json={
            "password": ADMIN_PASS, "citySlug": "guwahati", "imageId": "nope", "action": "approve",
        })

        assert response.status_code == 404

    def test_pending_queue(self, client):
        response = client.post("/api/admin/pending", json={"password": ADMIN_PASS})

        assert [img["id"] for img in response.json()] == ["img-3"]
