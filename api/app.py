from __future__ import annotations

import logging

from fastapi import FastAPI

from api.core.config import get_settings
from api.core.errors import install_error_handlers
from api.core.log import configure_logging
from api.routers import auth as auth_router
from api.routers import loyalties as loyalties_router
from api.services.session_service import build_session_codec

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application: logging, session codec, error handlers and routers."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Loyalty Card API")
    app.state.session_codec = build_session_codec(settings)
    install_error_handlers(app)

    app.include_router(auth_router.router)
    app.include_router(loyalties_router.router)

    logger.info("loyalty API configured (env=%s)", settings.app_env)
    return app
