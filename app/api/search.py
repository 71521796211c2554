"""Search bar endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from app.core.dependencies import get_search_debouncer
from app.services.search.debouncer import SearchDebouncer

router = APIRouter()


class SearchTextRequest(BaseModel):
    """Search input change."""
    text: str


class SearchState(BaseModel):
    """Displayed search text and the committed query."""
    text: str
    query: Optional[str] = None
    pending: bool = False


def _search_state(search: SearchDebouncer) -> SearchState:
    return SearchState(
        text=search.text,
        query=search.committed_query,
        pending=search.has_pending_commit,
    )


@router.get("/api/search", response_model=SearchState)
async def get_search(search: SearchDebouncer = Depends(get_search_debouncer)):
    """Get the search state."""
    return _search_state(search)


@router.post("/api/search/text", response_model=SearchState)
async def change_text(
    body: SearchTextRequest,
    search: SearchDebouncer = Depends(get_search_debouncer),
):
    """Update the search text; the query is committed after a quiet period."""
    search.on_change_text(body.text)
    return _search_state(search)


@router.post("/api/search/submit", response_model=SearchState)
async def submit(search: SearchDebouncer = Depends(get_search_debouncer)):
    """Commit the current search text now."""
    search.on_submit()
    return _search_state(search)
