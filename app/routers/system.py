from fastapi import APIRouter

from app.config import get_settings

router = APIRouter(
    prefix="/system",
    tags=["system"],
)


@router.get("/health")
def health() -> dict:
    """Liveness probe; does not touch the database."""
    s = get_settings()
    return {"status": "ok", "app": s.app_name, "environment": s.environment}
