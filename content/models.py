import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

STATE_FIELDS = ("name", "description", "history", "highlights", "festivals")
CITY_FIELDS = ("name", "summary", "history", "localSpecialties", "explore")

NAME_LIMIT = 100
EMAIL_LIMIT = 100
MESSAGE_LIMIT = 1000
CAPTION_LIMIT = 100


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class GalleryImage(BaseModel):
    id: str = Field(default_factory=_new_id)
    url: str
    caption: str = ""
    moderated: bool = False
    uploadedAt: str = Field(default_factory=_now)


class FeedbackEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    email: str
    message: str
    timestamp: str = Field(default_factory=_now)


# ---- request bodies ----
# fields stay optional so the routes can answer 400 with their own messages

class FeedbackCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class AdminRequest(BaseModel):
    password: Optional[str] = None


class StateUpdate(AdminRequest):
    stateData: Optional[Dict[str, Any]] = None


class CityUpdate(AdminRequest):
    cityData: Optional[Dict[str, Any]] = None


class ModerationRequest(AdminRequest):
    citySlug: Optional[str] = None
    imageId: Optional[str] = None
    action: Optional[str] = None
