from fastapi import APIRouter, Depends

from content.models import EMAIL_LIMIT, MESSAGE_LIMIT, NAME_LIMIT, FeedbackCreate
from content.store import ContentStore
from database import get_store
from errors import ValidationError

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.post("")
def submit_feedback(body: FeedbackCreate, store: ContentStore = Depends(get_store)):
    if not body.name or not body.email or not body.message:
        raise ValidationError("All fields are required")

    if "@" not in body.email:
        raise ValidationError("Invalid email address")

    store.add_feedback(
        name=body.name[:NAME_LIMIT],
        email=body.email[:EMAIL_LIMIT],
        message=body.message[:MESSAGE_LIMIT],
    )
    return {"success": True, "message": "Feedback submitted successfully"}
