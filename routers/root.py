from fastapi import APIRouter

router = APIRouter(tags=["root"])


@router.get("/api")
async def welcome() -> dict[str, str]:
    """Liveness and welcome message"""
    return {"message": "Welcome to FoodGuide API!"}


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check"""
    return {"status": "ok"}
