from fastapi import APIRouter, Depends

from content.store import ContentStore
from database import get_store

router = APIRouter(prefix="/cities", tags=["Cities"])


@router.get("")
def get_cities(store: ContentStore = Depends(get_store)):
    return store.list_cities()


@router.get("/{slug}")
def get_city(slug: str, store: ContentStore = Depends(get_store)):
    return store.get_city(slug)
