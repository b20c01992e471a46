import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseModel):
    admin_pass: str = "changeme"
    admin_pass_hash: Optional[str] = None
    data_dir: Path = BASE_DIR / "data"
    web_dir: Path = BASE_DIR / "web"
    upload_dir: Path = BASE_DIR / "web" / "uploads"
    max_upload_mb: int = 5
    frontend_url: Optional[str] = None
    log_level: str = "INFO"
    port: int = 3000

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def load_settings() -> Settings:
    web_dir = Path(os.getenv("WEB_DIR") or BASE_DIR / "web")

    return Settings(
        admin_pass=os.getenv("ADMIN_PASS") or "changeme",
        admin_pass_hash=os.getenv("ADMIN_PASS_HASH") or None,
        data_dir=Path(os.getenv("DATA_DIR") or BASE_DIR / "data"),
        web_dir=web_dir,
        upload_dir=Path(os.getenv("UPLOAD_DIR") or web_dir / "uploads"),
        max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", "5")),
        frontend_url=os.getenv("FRONTEND_URL") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", "3000")),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
