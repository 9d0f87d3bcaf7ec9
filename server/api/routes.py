from fastapi import APIRouter
from .rooms import router as rooms_router

router = APIRouter()
router.include_router(rooms_router)

@router.get("/health")
async def health():
    return {"status": "ok"}
