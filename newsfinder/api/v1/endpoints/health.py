from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from .... import __version__
from ....api.dependencies import get_search_orchestrator
from ....config import get_settings
from ....news.services.search_orchestrator import SearchOrchestrator

router = APIRouter()

SERVICE_NAME = "NewsFinder API"


@router.get("/health")
def health_check(
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
) -> Dict[str, Any]:
    settings = get_settings()

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__,
        "environment": "development" if settings.debug else "production",
        "sources": orchestrator.describe_sources(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
