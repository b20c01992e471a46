import os
import tempfile
import uuid

import pandas as pd
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from auth.auth_utils import verify_admin
from content.models import (
    CITY_FIELDS,
    STATE_FIELDS,
    AdminRequest,
    CityUpdate,
    ModerationRequest,
    StateUpdate,
)
from content.store import CITIES, STATES, ContentStore
from database import get_moderation, get_store
from errors import ValidationError
from moderation.workflow import ModerationWorkflow
from settings import Settings, get_settings

router = APIRouter(prefix="/admin", tags=["Admin"])


# ----------------------------
# UPDATE STATE / CITY
# ----------------------------
@router.post("/update/state")
def update_state(
    body: StateUpdate,
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)

    if not body.stateData or not body.stateData.get("slug"):
        raise ValidationError("Invalid state data")

    store.replace_fields(STATES, body.stateData["slug"], body.stateData, STATE_FIELDS)
    return {"success": True, "message": "State updated successfully"}


@router.post("/update/city")
def update_city(
    body: CityUpdate,
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)

    if not body.cityData or not body.cityData.get("slug"):
        raise ValidationError("Invalid city data")

    store.replace_fields(CITIES, body.cityData["slug"], body.cityData, CITY_FIELDS)
    return {"success": True, "message": "City updated successfully"}


# ----------------------------
# IMAGE MODERATION
# ----------------------------
@router.post("/moderate")
def moderate_image(
    body: ModerationRequest,
    workflow: ModerationWorkflow = Depends(get_moderation),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)

    if not body.citySlug or not body.imageId or not body.action:
        raise ValidationError("Missing required parameters")

    gallery = workflow.moderate(body.citySlug, body.imageId, body.action)
    return {
        "success": True,
        "message": f"Image {body.action}d successfully",
        "gallery": gallery,
    }


@router.post("/pending")
def pending_images(
    body: AdminRequest,
    workflow: ModerationWorkflow = Depends(get_moderation),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)
    return workflow.pending_images()


# ----------------------------
# FEEDBACK
# ----------------------------
@router.post("/feedback")
def get_feedback(
    body: AdminRequest,
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)
    return store.list_feedback()


@router.post("/feedback/export")
def export_feedback(
    body: AdminRequest,
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    verify_admin(body.password, settings)

    feedback = store.list_feedback()
    if not feedback:
        return {"message": "No feedback to export"}

    rows = [
        {
            "Name": f.get("name", ""),
            "Email": f.get("email", ""),
            "Message": f.get("message", ""),
            "Submitted": f.get("timestamp", ""),
        }
        for f in feedback
    ]

    df = pd.DataFrame(rows)
    filename = os.path.join(tempfile.gettempdir(), f"feedback_{uuid.uuid4().hex}.xlsx")
    df.to_excel(filename, index=False)

    return FileResponse(
        path=filename,
        filename="feedback.xlsx",
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        background=BackgroundTask(os.remove, filename),
    )
