# backend/main.py
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import DEFAULT_SECRET_KEY, Settings, get_settings
from database import build_engine, build_session_factory, init_db
from utils.errors import register_exception_handlers
from utils.logging_config import setup_logging

load_dotenv()

from routes.auth import router as auth_router
from routes.service_requests import router as service_requests_router
from routes.health import router as health_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if settings.SECRET_KEY == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set, tokens are signed with the development key")

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION)

    # Read-only after startup; handlers reach it through request.app.state
    app.state.settings = settings
    app.state.engine = build_engine(settings.DATABASE_URL)
    app.state.SessionLocal = build_session_factory(app.state.engine)
    init_db(app.state.engine)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(service_requests_router)
    app.include_router(health_router)

    logger.info("%s %s ready", settings.PROJECT_NAME, settings.API_VERSION)
    return app


app = create_app()
