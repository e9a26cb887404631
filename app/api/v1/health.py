from fastapi import APIRouter

from app.schemas.workout import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True, "message": "Server is running"}
