from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint for load balancer."""
    return {
        "status": "ok",
        "service": "paygate-backend",
        "timestamp": datetime.now(UTC).isoformat(),
    }
