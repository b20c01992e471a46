import hmac
import logging
from typing import Optional

from passlib.context import CryptContext

from errors import AuthError, ContentError
from settings import Settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

DEFAULT_ADMIN_PASS = "changeme"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def check_admin_password(password: Optional[str], settings: Settings) -> bool:
    if not password:
        return False
    if settings.admin_pass_hash:
        try:
            return pwd_context.verify(password, settings.admin_pass_hash)
        except ValueError as exc:
            logger.error("ADMIN_PASS_HASH is not a valid argon2 hash: %s", exc)
            raise ContentError("Admin password is misconfigured") from exc
    return hmac.compare_digest(password.encode(), settings.admin_pass.encode())


def verify_admin(password: Optional[str], settings: Settings, message: str = "Invalid admin password") -> None:
    """Single shared-secret gate for every privileged request."""
    if not check_admin_password(password, settings):
        logger.warning("Rejected admin request with a bad password")
        raise AuthError(message)
