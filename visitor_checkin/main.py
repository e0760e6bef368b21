"""
Visitor Check-in - FastAPI Application
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException
import structlog

from visitor_checkin.api.api import api_router
from visitor_checkin.core.config import settings
from visitor_checkin.core.database import close_db, init_db
from visitor_checkin.core.logger import setup_logging
from visitor_checkin.core.middleware import BodySizeLimitMiddleware

setup_logging()
logger = structlog.get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting Visitor Check-in", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)
    init_db()

    yield

    # Shutdown
    close_db()
    logger.info("Shutting down Visitor Check-in")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Visitor check-in form and registration API",
    debug=settings.DEBUG,
    lifespan=lifespan
)


app.add_middleware(BodySizeLimitMiddleware)

# Add CORS middleware last so it wraps the body limit
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


@app.get("/", include_in_schema=False)
async def visitor_form(request: Request):
    """Serve the capture form"""
    return templates.TemplateResponse(
        request,
        "visitor_form.html",
        {"title": settings.APP_NAME, "api_url": request.url_for("create_visitor").path},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed bodies with the same message shape as the endpoint"""
    errors = exc.errors()
    logger.warning("Request validation failed", path=request.url.path, errors=len(errors))

    if any(tuple(error.get("loc", ())) == ("body",) and error.get("type") == "missing" for error in errors):
        message = "Name and reason are required."
    else:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())[1:]) or 'body'}: {error.get('msg')}"
            for error in errors
        )
        message = f"Invalid request body: {details}"
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Global HTTP exception handler"""
    logger.error("HTTP Exception", status_code=exc.status_code, detail=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error("Unhandled exception", path=request.url.path, err=str(exc), exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Server error", "error": str(exc)}
    )
