"""FastAPI app, CORS, error envelopes and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockify.config import API_VERSION, CORS_ORIGINS, DATA_DIR, LOG_LEVEL, ensure_data_dir

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(levelname)s: %(name)s: %(message)s",
)

from mockify.api.routes.resources import build_router
from mockify.api.state import AppState, get_state
from mockify.core.errors import NotFoundError, StorageError, ValidationError
from mockify.models import PLAYLISTS, TRACKS

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = {"success": False, "message": "Route not found"}
SERVER_ERROR = {"success": False, "message": "Something went wrong!"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    logger.info("Serving collections from %s", DATA_DIR)
    yield


app = FastAPI(
    title="Mockify API",
    description="REST API for tracks and playlists stored as JSON documents",
    version=API_VERSION,
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies (e.g. invalid JSON) get the same shape as validation errors."""
    errors = exc.errors()
    if errors and errors[0].get("type") == "json_invalid":
        message = "Request body must be valid JSON"
    elif errors:
        message = str(errors[0].get("msg", "Invalid request"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    # Clients rely on an empty object for unknown ids
    return JSONResponse(status_code=404, content={})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=ROUTE_NOT_FOUND)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content=SERVER_ERROR)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=SERVER_ERROR)


@app.get("/")
def index():
    """Service banner with the collection endpoints."""
    return {
        "message": "Welcome to Mockify API",
        "version": API_VERSION,
        "endpoints": {
            "tracks": "/api/tracks",
            "playlists": "/api/playlists",
        },
    }


app.include_router(build_router(TRACKS), prefix="/api/tracks", tags=["tracks"])
app.include_router(build_router(PLAYLISTS), prefix="/api/playlists", tags=["playlists"])
