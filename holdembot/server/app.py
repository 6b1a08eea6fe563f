"""
FastAPI Application Entry Point for holdembot.

This module creates and configures the FastAPI application with:
- HTTP routes for the single table
- CORS middleware for development
"""

import asyncio
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holdembot import __version__
from holdembot.roster import InMemoryLedger
from holdembot.server.routes import router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="holdembot",
        description="Texas Hold'em table with weighted-random bots",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    # Single table; ledger balances outlive table rebuilds
    app.state.table = None
    app.state.ledger = InMemoryLedger()
    app.state.lock = asyncio.Lock()

    logger.info("holdembot app created")
    return app


# Create the application instance
app = create_app()
