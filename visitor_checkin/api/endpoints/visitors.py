"""
Visitor registration endpoints
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import structlog

from visitor_checkin.core.database import get_collection
from visitor_checkin.core.exceptions import VisitorStoreError
from visitor_checkin.models.visitor import VisitorRecord
from visitor_checkin.schemas.visitor import ErrorResponse, MessageResponse, VisitorCreate
from visitor_checkin.services.visitor_store import VisitorStore

router = APIRouter()
logger = structlog.get_logger(__name__)


def get_visitor_store() -> VisitorStore:
    """Get the visitor store"""
    return VisitorStore(get_collection())


@router.post(
    "",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": ErrorResponse}},
)
async def create_visitor(
    visitor: VisitorCreate,
    store: VisitorStore = Depends(get_visitor_store)
):
    """Register a visitor"""
    logger.info(
        "Received visitor",
        has_name=bool(visitor.name),
        has_reason=bool(visitor.reason),
        has_photo=bool(visitor.photo),
        has_signature=bool(visitor.signature),
    )

    # Basic validation
    if visitor.missing_required():
        return JSONResponse(status_code=400, content={"message": "Name and reason are required."})

    if not visitor.photo:
        logger.warning("Photo not received")
    if not visitor.signature:
        logger.warning("Signature not received")

    record = VisitorRecord(
        name=visitor.name,
        reason=visitor.reason,
        photo=visitor.photo or "",
        signature=visitor.signature or "",
    )

    try:
        await store.insert(record)
    except VisitorStoreError as e:
        logger.error("Error saving visitor", err=e.message)
        return JSONResponse(status_code=500, content={"message": "Server error", "error": e.message})

    return {"message": "Visitor registered successfully"}
