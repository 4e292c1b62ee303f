"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from food_api.api.foods import router as food_router
from food_api.app_logging import configure_logging
from food_api.config import parse_allowed_origins
from food_api.containers import AppContainer
from food_api.errors import FoodApiError
from food_api.services.seed import seed_foods


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_data:
            seed_foods(state_container.food_repository)
        yield
        await state_container.close_resources()

    app = FastAPI(title="Food API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination", "api-supported-versions"],
    )

    @app.exception_handler(FoodApiError)
    async def handle_food_api_error(
        _request: Request, exc: FoodApiError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content={"detail": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    if container.settings.environment != "local":

        @app.exception_handler(Exception)
        async def handle_unexpected_error(
            request: Request, exc: Exception
        ) -> JSONResponse:
            logger.error(
                "Unhandled error: %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "An unexpected fault happened. Try again later."},
            )

    app.include_router(food_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
