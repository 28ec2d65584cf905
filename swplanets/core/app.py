import random
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from swplanets.api.main import api_router
from swplanets.services.directory.service import DirectoryService
from swplanets.services.favourites import FavouritesStore
from swplanets.services.seen import SeenSet

from .config import settings
from .exceptions import SWPlanetsError
from .logging import setup_logging
from .version import __version__

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the process-wide services on startup and release them on shutdown.
    """
    app.state.directory = DirectoryService(
        base_url=settings.SWAPI_BASE_URL, timeout=settings.UPSTREAM_TIMEOUT_SECONDS
    )
    app.state.favourites = FavouritesStore()
    app.state.seen = SeenSet()
    app.state.rng = random.Random(settings.DISCOVERY_SEED)
    logger.info(f"SWPlanets {__version__} started against {settings.SWAPI_BASE_URL}")
    yield
    try:
        await app.state.directory.close()
        logger.info("Directory HTTP client closed")
    except Exception as exc:
        logger.warning(f"Failed to close directory HTTP client: {exc}")


app = FastAPI(
    title="SWPlanets",
    description="Browse the Star Wars planet catalog, keep favourites and discover random planets",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SWPlanetsError)
async def service_error_handler(request: Request, exc: SWPlanetsError) -> JSONResponse:
    message = f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
    if exc.status_code >= 500:
        logger.error(message)
    else:
        logger.warning(message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}" for err in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {details}")
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error while processing {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500, content={"error": "An unexpected error occurred. Please try again later."}
    )


app.include_router(api_router)
