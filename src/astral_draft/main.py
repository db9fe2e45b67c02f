"""
Astral Draft Trade API - Main Application

FastAPI application for fantasy football trade analysis.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from astral_draft import __version__
from astral_draft.api.routes import trade_analyzer, trade_review, valuation, viz
from astral_draft.config import get_settings
from astral_draft.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    league = get_settings().default_league_settings()
    logger.info("Trade engine v%s ready", __version__)
    logger.info(
        "Requests without a league block use %s scoring, %d-player rosters, "
        "trade voting %s",
        league.scoring_type.value,
        league.max_roster_size,
        "on" if league.uses_trade_voting else "off",
    )

    yield

    logger.info("Trade engine stopped")


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()
    setup_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "valuation": "/api/valuation",
                "trade_analyzer": "/api/trade-analyzer",
                "trade_review": "/api/trade-review",
                "viz": "/api/viz",
            },
        }

    # Register API routes
    app.include_router(valuation.router, prefix="/api/valuation", tags=["Valuation"])
    app.include_router(trade_analyzer.router, prefix="/api/trade-analyzer", tags=["Trade Analyzer"])
    app.include_router(trade_review.router, prefix="/api/trade-review", tags=["Trade Review"])
    app.include_router(viz.router, prefix="/api/viz", tags=["Visualization"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the server entry point)."""
    settings = get_settings()
    uvicorn.run(
        "astral_draft.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
