import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from link_shortener.config import settings
from link_shortener.logging_config import setup_logging
from link_shortener.exceptions import ShortenerError
from link_shortener.dependencies import get_shortener_service
from link_shortener.store.factory import StoreFactory
from link_shortener.services.shortener_service import ShortenerService
from link_shortener.api.v1 import links, redirect

setup_logging(settings.log_level)
logger = logging.getLogger("link_shortener.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s with %s key store", settings.app_name, settings.store_backend.value)
    yield
    await StoreFactory.close_instance()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan
)


@app.exception_handler(ShortenerError)
async def shortener_error_handler(request: Request, exc: ShortenerError):
    """Map service errors to the JSON error body"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc), "code": exc.status_code},
    )


@app.get("/", response_class=PlainTextResponse)
def read_root(shortener: ShortenerService = Depends(get_shortener_service)):
    """Liveness greeting"""
    return shortener.get_hello()


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "store": settings.store_backend.value,
    }


######## Include routers
app.include_router(links.router)
app.include_router(redirect.router)
