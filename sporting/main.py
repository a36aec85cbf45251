import logging
import sys
import time
import traceback
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from sporting.api.error_handlers import register_exception_handlers, unhandled_error_handler
from sporting.api.v1.api import api_router
from sporting.core.config import settings
from sporting.db.base import init_db

# keep the reloader quiet
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Team management API"
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next: Callable) -> Response:
    """
    Log method, path, status and duration of every request

    Unhandled errors are answered here, inside CORS, so the 500 carries the
    CORS headers and still gets an access line.
    """
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        response = await unhandled_error_handler(request, e)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


# added last so it wraps the logging middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
async def startup_db_client():
    """
    Create missing tables when the application starts
    """
    logger.info("Initialising database...")
    try:
        init_db()
        logger.info("Database initialised")
    except Exception as e:
        logger.error(f"Database initialisation failed: {str(e)}")
        logger.error(traceback.format_exc())
        logger.warning("Starting anyway, database operations may fail")


@app.get("/")
async def root():
    """Health check"""
    return {
        "status": "online",
        "version": settings.VERSION,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("sporting.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
