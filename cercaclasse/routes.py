"""HTTP endpoints: search API, health check and the search page."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from cercaclasse.config import settings
from cercaclasse.search import search
from cercaclasse.store import RecordStore, get_store
from cercaclasse.ui import SEARCH_PAGE

router = APIRouter()


@router.get("/api/search", tags=["search"])
def search_endpoint(q: str = "", store: RecordStore = Depends(get_store)) -> dict:
    """
    Search classes by school name, municipality or mechanographic code.

    Load failures propagate to the app's error handler (HTTP 500).
    """
    return search(q, store).to_dict()


@router.get("/health", tags=["health"])
def health_check(store: RecordStore = Depends(get_store)) -> dict:
    return {
        "status": "ok",
        "records_loaded": store.loaded,
        "version": settings.api_version,
    }


@router.get("/cerca", response_class=HTMLResponse, include_in_schema=False)
def search_page() -> str:
    return SEARCH_PAGE
