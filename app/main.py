# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.database import init_store

# Routers
from app.routers.products import router as products_router
from app.routers.profile import router as profile_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")

OWNER_ALLOWED_METHODS = "GET, POST"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Reset the in-memory store to its seed data.

    Shutdown:
      - Nothing to clean up; the store is not persisted.
    """
    logger.info("🔄 Startup: seeding in-memory store...")
    init_store()
    if settings.GOOGLE_SHEET_ID and settings.GOOGLE_APPLICATION_CREDENTIALS:
        logger.info("✅ Startup: Google Sheets product logging enabled.")
    else:
        logger.info("ℹ️ Startup: Google Sheets product logging disabled.")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- CORS configuration ---
# The owner dashboard front end runs on its own origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error bodies ---
# Every error leaves as {"message": "..."}.


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    headers = getattr(exc, "headers", None)

    # Owner routes only serve GET and POST, whatever method Starlette matched.
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path.startswith(settings.API_PREFIX)
    ):
        logger.info("Method %s Not Allowed for %s", request.method, request.url.path)
        detail = f"Method {request.method} Not Allowed"
        headers = {**(headers or {}), "Allow": OWNER_ALLOWED_METHODS}

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": detail},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected unreadable body for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request body must be a JSON object."},
    )


# API prefix, e.g. /api/owner/products
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(profile_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "marxia-backend"}
