"""FastAPI application entrypoint. No business logic; only wiring, lifecycle and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import create_client
from app.core.exceptions import DuneError, UnauthorizedError
from app.core.security import dummy_password_hash, get_jwt_secret
from app.stores import ensure_indexes

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Acquire the MongoDB client on startup and release it on shutdown."""
    # Missing signing secret is fatal: raises ConfigError before serving.
    get_jwt_secret(settings)
    # Computed once up front so the first unknown-user login costs the same as later ones.
    dummy_password_hash()

    client = create_client(settings)
    app.state.db = client[settings.MONGODB_DB_NAME]
    ensure_indexes(app.state.db)
    logger.info("Connected to MongoDB database %s", settings.MONGODB_DB_NAME)
    try:
        yield
    finally:
        client.close()
        logger.info("MongoDB client closed")


app = FastAPI(
    title="The Dune API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DuneError)
async def handle_dune_error(request: Request, exc: DuneError) -> JSONResponse:
    """Map domain errors to their HTTP status with a {"detail": message} body."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    if exc.status_code >= 500:
        logger.error("Request failed: %s", exc.message, extra={"path": request.url.path})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Welcome to The Dune Game"}
