"""
EduGuide Platform - Main Application

FastAPI backend with:
- MongoDB for every entity (users, student profiles, college admins,
  placement uploads, transactions)
- Disk-backed uploads served from /uploads
- JWT authentication
- Fixed window rate limiting per client address

Run: uvicorn app.main:app --reload
"""

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.api.routes import api_router, root_router
from app.core.config import get_settings
from app.core.rate_limit import FixedWindowRateLimiter, RATE_LIMIT_MESSAGE
from app.db.mongodb import init_mongo_indexes, test_mongo_connection, close_mongo_client
from app.schemas.schemas import HealthResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    force=True
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Without the database there is nothing to serve
    if not test_mongo_connection():
        logger.critical("MongoDB unreachable at startup, shutting down")
        raise RuntimeError("MongoDB connection failed")
    init_mongo_indexes()
    os.makedirs(settings.upload_dir, exist_ok=True)
    logger.info("MongoDB connected, uploads in %s", os.path.abspath(settings.upload_dir))

    yield

    close_mongo_client()


# Create FastAPI app
app = FastAPI(
    title="EduGuide Platform",
    description="""
    Education-guidance backend.

    ## Features
    - **Authentication**: registration and JWT login for admins and students
    - **Students**: profile submission with photo and mark sheet uploads
    - **College Admins**: onboarding requests with approve / disapprove
    - **Placements**: CSV placement statistics, reviewed before publication
    - **Transactions**: payment ledger with status updates by order id
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.state.rate_limiter = FixedWindowRateLimiter(
    max_requests=settings.rate_limit_max_requests,
    window_seconds=settings.rate_limit_window_seconds
)


@app.middleware("http")
async def rate_limit(request: Request, call_next):
    limiter = request.app.state.rate_limiter
    client = request.client.host if request.client else "unknown"
    if not limiter.hit(client):
        logger.warning("Rate limit exceeded for %s", client)
        return JSONResponse(
            status_code=429,
            content={"detail": RATE_LIMIT_MESSAGE},
            headers={"X-RateLimit-Remaining": "0"}
        )
    response = await call_next(request)
    response.headers["X-RateLimit-Remaining"] = str(limiter.remaining(client))
    return response


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        "%s %s -> %s in %.4f secs",
        request.method, request.url.path, response.status_code, process_time
    )
    return response


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed input is a 400 here, not FastAPI's default 422
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(PyMongoError)
async def storage_error_handler(request: Request, exc: PyMongoError):
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Storage error"})


# Include API routes
app.include_router(api_router, prefix="/api")
app.include_router(root_router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    connected = test_mongo_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        mongodb="connected" if connected else "disconnected"
    )
