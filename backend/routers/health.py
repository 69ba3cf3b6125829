import time

from fastapi import APIRouter, Depends

from routers.deps import get_registry
from services.registry import DatasetRegistry

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(registry: DatasetRegistry = Depends(get_registry)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "1.0.0",
        "datasets": len(registry.countries()),
    }
