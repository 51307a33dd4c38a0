"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from user_api.database.connection import get_db_pool

router = APIRouter()


@router.get("")
async def health_check(db_pool=Depends(get_db_pool)):
    """Report whether the database answers"""
    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected"
        }

    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")
