from fastapi import APIRouter, Depends

from auth.auth_utils import verify_admin
from content.models import AdminRequest
from settings import Settings, get_settings

router = APIRouter(prefix="/admin", tags=["Auth"])


@router.post("/login")
def login(body: AdminRequest, settings: Settings = Depends(get_settings)):
    verify_admin(body.password, settings, message="Invalid password")
    return {"success": True, "message": "Login successful"}
