# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the PasteDrop API.
# create_app() assembles the full request pipeline once at startup:
#
#   request logging -> CORS -> path-scoped credential gates -> routes
#
# and installs the global error and not-found handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from collections import Counter
from contextlib import asynccontextmanager
from typing import Callable, Sequence

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from app.auth import AdminSessionManager, require_admin_session, require_file_api_key
from app.config import Settings, settings as default_settings
from app.exceptions import register_error_handlers
from app.middleware import (
    ErrorBoundaryMiddleware,
    GateBinding,
    PathGateMiddleware,
    RequestLoggingMiddleware,
)
from app.routers import (
    ADMIN_FILES_PREFIX,
    USER_FILES_PREFIX,
    admin,
    admin_pastes,
    api_keys,
    health,
    register_admin_files_routes,
    register_file_view_routes,
    register_upload_routes,
    register_user_files_routes,
    storage_configs,
    system,
    user_pastes,
)
from core.services import (
    ApiKeyService,
    FileService,
    PasteService,
    StorageConfigService,
    SystemSettingsService,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

RouteRegistrar = Callable[[FastAPI], None]


# =============================================================================
# Route Groups and Gates
# =============================================================================

# Mounted at "/" in this order
ROUTE_GROUPS: tuple[APIRouter, ...] = (
    admin.router,
    api_keys.router,
    admin_pastes.router,
    user_pastes.router,
    storage_configs.router,
    system.router,
)

ROUTE_REGISTRARS: tuple[RouteRegistrar, ...] = (
    register_admin_files_routes,
    register_user_files_routes,
    register_upload_routes,
    register_file_view_routes,
)

# Only the file namespaces are gated here; other groups check credentials
# in their own dependencies.
GATE_BINDINGS: tuple[GateBinding, ...] = (
    GateBinding(prefix=ADMIN_FILES_PREFIX, gate=require_admin_session, state_key="admin"),
    GateBinding(prefix=USER_FILES_PREFIX, gate=require_file_api_key, state_key="api_key"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting PasteDrop API in {app_settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {app_settings.cors_origins_list}")
    yield
    logger.info("Shutting down PasteDrop API")


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    settings: Settings | None = None,
    route_groups: Sequence[APIRouter] | None = None,
    registrars: Sequence[RouteRegistrar] | None = None,
    gates: Sequence[GateBinding] | None = None,
) -> FastAPI:
    """
    Build the application.

    Every argument defaults to the production wiring; tests pass stubs.

    Args:
        settings: Application settings (defaults to the environment)
        route_groups: Routers mounted at "/"
        registrars: Functions that register routes on the app
        gates: Prefix-scoped credential gates

    Returns:
        A fully assembled FastAPI application
    """
    settings = settings or default_settings
    route_groups = ROUTE_GROUPS if route_groups is None else route_groups
    registrars = ROUTE_REGISTRARS if registrars is None else registrars
    gates = GATE_BINDINGS if gates is None else gates

    app = FastAPI(
        title="PasteDrop API",
        description="Paste sharing and file storage for administrators and API-key users.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------
    files = FileService()
    app.state.settings = settings
    app.state.admin_sessions = AdminSessionManager(settings)
    app.state.api_keys = ApiKeyService()
    app.state.pastes = PasteService()
    app.state.files = files
    app.state.storage_configs = StorageConfigService(files)
    app.state.system = SystemSettingsService(settings.MAX_UPLOAD_SIZE_MB)

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    # Starlette runs the last added middleware first, so these are added
    # innermost-first: a request meets logging, then CORS, then the error
    # boundary, then the gates.
    app.add_middleware(PathGateMiddleware, bindings=gates)
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_headers=settings.cors_allow_headers_list,
        allow_methods=settings.cors_allow_methods_list,
        max_age=settings.CORS_MAX_AGE,
    )
    app.add_middleware(RequestLoggingMiddleware)

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------
    for router in route_groups:
        app.include_router(router)
    for register in registrars:
        register(app)
    app.include_router(health.router, tags=["Health"])

    _warn_on_route_collisions(app)

    # -------------------------------------------------------------------------
    # Error Handling
    # -------------------------------------------------------------------------
    register_error_handlers(app)

    return app


def _warn_on_route_collisions(app: FastAPI) -> None:
    """Log (method, path) pairs claimed by more than one route; the first registered wins."""
    claims = Counter(
        (method, route.path)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    )
    for (method, path), count in sorted(claims.items()):
        if count > 1:
            logger.warning(f"Route {method} {path} is registered {count} times")


app = create_app()
