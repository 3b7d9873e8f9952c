from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import numerals
from core.config import settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from core.errors import register_error_handlers
from numerals import available_locales

# Initialize logging before anything else
configure_logging(
    level=settings.LOG_LEVEL,
    json_logs=settings.LOG_JSON,
)

log = get_logger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Numerals API starting up", locales=available_locales())
    yield
    log.info("shutdown", message="Numerals API shutting down")


app = FastAPI(
    title="Numerals API",
    description="Spelled-out numbers in twelve locales, with per-language grammar for gender, agreement and elision",
    version=VERSION,
    lifespan=lifespan,
)

# Register structured error handlers
register_error_handlers(app)

# Middleware
app.add_middleware(RequestLoggingMiddleware)

app.include_router(numerals.router, prefix="/api/numerals", tags=["numerals"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
