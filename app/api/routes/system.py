from datetime import datetime, timezone
from fastapi import APIRouter
from app.core.middleware import request_stats

router = APIRouter()

@router.get("/health")
async def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

@router.get("/stats")
async def stats():
    return request_stats.snapshot()
