from fastapi import APIRouter

from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def healthcheck() -> HealthResponse:
    """Lightweight health endpoint for liveness probes."""
    return HealthResponse(
        status="ok",
        message="Translation API is running with Azure Translator",
    )
