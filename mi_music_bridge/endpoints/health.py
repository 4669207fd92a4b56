"""GET /health — health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Health check."""
    bridge = request.app.state.bridge
    return {
        "status": "healthy",
        "platform": bridge.capabilities().platform,
    }
