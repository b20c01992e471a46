from fastapi import APIRouter, Depends

from content.store import ContentStore
from database import get_store

router = APIRouter(prefix="/states", tags=["States"])


@router.get("")
def get_states(store: ContentStore = Depends(get_store)):
    return store.list_states()


# state plus every city whose stateSlug points at it
@router.get("/{slug}")
def get_state(slug: str, store: ContentStore = Depends(get_store)):
    return store.get_state(slug)
