"""
API router configuration
"""

from fastapi import APIRouter
from visitor_checkin.api.endpoints import visitors

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(visitors.router, prefix="/visitors", tags=["visitors"])
