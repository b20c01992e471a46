from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from content.store import ContentStore
from moderation.workflow import ModerationWorkflow
from settings import Settings, get_settings


@lru_cache
def store_for(data_dir: Path) -> ContentStore:
    # one store per directory so every request shares its write locks
    return ContentStore(data_dir)


def get_store(settings: Settings = Depends(get_settings)) -> ContentStore:
    return store_for(settings.data_dir)


def get_moderation(
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> ModerationWorkflow:
    return ModerationWorkflow(store, settings.upload_dir)
