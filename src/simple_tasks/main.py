"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simple_tasks.api.routes import router
from simple_tasks.config import settings
from simple_tasks.store.tasks import get_task_store

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting task store service...")
    logger.info(f"Tasks file: {get_task_store().storage_path}")

    yield

    logger.info("Shutting down task store service...")


app = FastAPI(
    title="Simple Tasks",
    description="Task list store behind the desktop shell",
    version="0.1.0",
    lifespan=lifespan,
)

# Only the shell's webview may call in from a browser context
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)

# Mount API routes
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint pointing at the API documentation."""
    return {"message": "Simple Tasks API", "docs": "/docs"}


def main() -> None:
    """Run the application."""
    uvicorn.run(
        "simple_tasks.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
