"""
FastAPI application serving the employment data API
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from employment_dashboard.api.routes import router
from employment_dashboard.api.schemas import ErrorResponse
from employment_dashboard.config import get_settings
from employment_dashboard.data.loader import get_dataset
from employment_dashboard.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    configure_logging()
    logger.info("Starting employment data API...")

    dataset = get_dataset()
    logger.info(f"Dataset ready: {len(dataset)} jobs, {len(dataset.locations)} locations")

    yield

    logger.info("Shutting down API...")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Employment Data API",
        description="Filtered job listings, summary stats and chart aggregates",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all for failures outside a route body, e.g. in a dependency"""
        logger.opt(exception=exc).error("Unhandled exception on {}: {}", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message="Internal server error", error=str(exc)).model_dump(),
        )

    app.include_router(router, prefix="/api", tags=["Employment Data"])
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
