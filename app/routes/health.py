from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe for the hosting environment."""
    return {"status": "healthy"}
