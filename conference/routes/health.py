"""Health check endpoint."""

from fastapi import APIRouter, Request

from conference import __version__
from conference.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        version=__version__,
        session_count=len(request.app.state.store),
    )
