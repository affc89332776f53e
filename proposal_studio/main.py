"""
Main entry point of Proposal Studio.
Creates and configures the web application.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proposal_studio.config import get_settings
from proposal_studio.models import ErrorResponse
from proposal_studio.api.router import api_router
from proposal_studio.exceptions import (
    ProposalStudioError,
    GenerationError,
    InputValidationError,
    StorageError,
)
from proposal_studio.services import (
    ClaudeClient,
    ExpirationSweeper,
    ProposalGenerator,
    ProposalSyncManager,
    create_store,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle.

    On start-up:
    1. Select the backing store once from configuration
    2. Build the sweeper, sync manager and generator
    3. Load the shared AE list and prompt

    On shutdown:
    1. Wait for pending expired-proposal deletions
    2. Close the store
    """
    settings = get_settings()
    store = create_store(settings)
    sweeper = ExpirationSweeper(store, retention_days=settings.proposal_retention_days)
    manager = ProposalSyncManager(store, sweeper)
    await manager.load()

    app.state.sync_manager = manager
    app.state.generator = ProposalGenerator(ClaudeClient())
    logger.info(
        f"Proposal Studio starting on {settings.host}:{settings.port} "
        f"(storage={store.mode.value})"
    )

    yield

    await sweeper.drain()
    await store.close()
    app.state.generator.claude_client.shutdown()
    logger.info("Proposal Studio stopped")


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    1. Basic app info
    2. CORS (lets the browser front end call the API)
    3. Error handlers and API router
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Proposal Studio",
        description="AI-assisted pricing proposals with demo, local or remote storage",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom exceptions become structured JSON responses
    @app.exception_handler(ProposalStudioError)
    async def proposal_studio_error_handler(request: Request, exc: ProposalStudioError):
        if isinstance(exc, InputValidationError):
            status_code = 400
        elif isinstance(exc, GenerationError):
            status_code = 502
        elif isinstance(exc, StorageError):
            status_code = 503
        else:
            status_code = 500
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error_code=exc.error_code,
                message=exc.message,
                details=exc.details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error_code="ERR_INTERNAL",
                message="Internal server error",
            ).model_dump(mode="json"),
        )

    # All routes live under /api/v1
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


@app.get("/")
async def root():
    """Basic server information."""
    return {
        "name": "Proposal Studio",
        "version": "1.0.0",
        "description": "AI-assisted pricing proposals",
        "docs": "/docs",
        "api": "/api/v1",
    }


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "proposal_studio.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
