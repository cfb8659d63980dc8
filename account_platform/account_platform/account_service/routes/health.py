"""
Health check endpoint
"""
import time

from fastapi import APIRouter, status

from ..db import check_db_connection
from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health_check():
    """
    Report service health, including database reachability.

    Returns:
        dict: message, status ("ok" or "error") and Unix timestamp in milliseconds
    """
    timestamp = int(time.time() * 1000)
    if not check_db_connection():
        return {"message": "Database connection failed", "status": "error", "timestamp": timestamp}
    return {"message": "System is healthy", "status": "ok", "timestamp": timestamp}
