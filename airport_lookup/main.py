import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from airport_lookup.config import Settings, settings as default_settings
from airport_lookup.database import Database
from airport_lookup.middleware.request_log import RequestLogMiddleware
from airport_lookup.routes.airports import router as airports_router
from airport_lookup.services.data_loader import WorkbookError, run_initial_load

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One storage handle for the load and for every request
        database = Database(settings.db_url)
        database.create_tables()
        app.state.database = database

        # The load finishes (or fails) before requests are accepted
        if settings.load_on_startup:
            try:
                result = await run_in_threadpool(
                    run_initial_load, database, settings.data_file, settings.reset_on_load
                )
                logger.info(
                    f"Loaded {result.records_inserted} records from {result.filename}"
                )
            except WorkbookError as e:
                logger.error(f"Initial data load failed: {e}")
            except Exception:
                logger.exception("Initial data load failed")
        else:
            logger.info("Initial data load skipped")

        logger.info(f"Server is ready on port {settings.port}")
        yield

        database.dispose()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Middlewares
    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "message": "Airport Lookup API is running",
            "version": settings.api_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "Alive"}

    # Routers
    app.include_router(airports_router)

    return app


app = create_app()
