import os
import logging
from pathlib import Path
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .database import init_db
from .routes import analysis_router, dashboard_router, override_router
from .services.corrections import AnalysisNotFoundError

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

# Sent on every response, including errors
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("🚀 Starting up Feedback Analyzer...")
    init_db()
    logger.info("✅ Database initialized and ready")

    yield

    logger.info("👋 Shutting down Feedback Analyzer...")


app = FastAPI(
    title="Feedback Analyzer API",
    description="Categorizes product feedback tweets and learns from reviewer corrections",
    version="2.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """Answer any OPTIONS request directly and add CORS headers to the rest."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


# ============================================================================
# ERROR HANDLERS
# ============================================================================

def error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)}, headers=CORS_HEADERS)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both plain 404s
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(exc)


@app.exception_handler(AnalysisNotFoundError)
async def not_found_handler(request: Request, exc: AnalysisNotFoundError):
    logger.error(f"Error: {str(exc)}")
    return error_response(exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(exc)


# ============================================================================
# ROUTES
# ============================================================================

app.include_router(analysis_router)
app.include_router(dashboard_router)
app.include_router(override_router)


@app.get("/", include_in_schema=False)
async def root():
    """Dashboard page."""
    return FileResponse(STATIC_DIR / "dashboard.html", media_type="text/html")
