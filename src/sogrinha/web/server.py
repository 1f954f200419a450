from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sogrinha.app import App
from sogrinha.config import Config
from sogrinha.errors import UserError
from sogrinha.web.error_handlers import general_exception_handler, user_error_handler
from sogrinha.web.openapi import set_custom_openapi
from sogrinha.web.routers import (
    bridge_router,
    contracts_router,
    lessees_router,
    owners_router,
    real_estates_router,
    stats_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        app.state.bridge = app_instance.bridge
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Sogrinha API",
        lifespan=lifespan,
        openapi_tags=[],  # Tags will be added by custom OpenAPI function
    )

    # The content view is served from its own origin
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Health check endpoint (at root level, not versioned)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    # API v1 routes
    app.include_router(bridge_router, prefix="/api/v1")
    app.include_router(owners_router, prefix="/api/v1")
    app.include_router(lessees_router, prefix="/api/v1")
    app.include_router(real_estates_router, prefix="/api/v1")
    app.include_router(contracts_router, prefix="/api/v1")
    app.include_router(stats_router, prefix="/api/v1")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app, config.app_version)

    return app
