"""Health check endpoints."""

from fastapi import APIRouter

from ..... import __version__
from ..deps import get_help_corpus, get_template_corpus
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="healthy", version=__version__, corpus="not_checked")


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness probe: the corpus must load."""
    try:
        templates = get_template_corpus()
        articles = get_help_corpus()
        corpus_status = f"loaded ({len(templates)} templates, {len(articles)} articles)"
    except Exception as e:
        corpus_status = f"error: {str(e)}"

    return HealthResponse(status="ready", version=__version__, corpus=corpus_status)
