from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from interviewace.api.api import api_router
from interviewace.config.logging_config import setup_logging
from interviewace.config.settings import settings
from interviewace.system.exceptions import BaseHTTPException, common_exception_handler, validation_exception_handler

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    logger.info(f"{settings.APP_NAME} started (AI {'enabled' if settings.ai_enabled else 'disabled'})")
    yield


def prepare_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Interview flow controller",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")
    app.add_exception_handler(BaseHTTPException, common_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    return app


def start_service() -> None:
    uvicorn.run(
        prepare_app(),
        host=settings.APP_ADDRESS,
        port=settings.APP_PORT,
    )


app = prepare_app()

if __name__ == "__main__":
    start_service()
