import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI

from .config import Settings, get_settings
from .schemas import GreetingResponse

logger = logging.getLogger(__name__)

TITLE = "demok8s"
VERSION = "1.0.0"


def hello_router(settings: Settings) -> APIRouter:
    """Build the router serving the greeting for ``settings``.

    The settings instance is frozen and only read here, so every request
    sees the value resolved at startup.
    """
    router = APIRouter(prefix="/api")

    @router.get("/hello", response_model=GreetingResponse)
    def hello() -> GreetingResponse:
        return GreetingResponse(message=settings.app_message, status="OK")

    return router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        source = "APP_MESSAGE" if settings.message_overridden else "default"
        logger.info("Serving greeting %r (%s)", settings.app_message, source)
        yield

    app = FastAPI(title=TITLE, version=VERSION, lifespan=lifespan)
    app.include_router(hello_router(settings))
    return app


app = create_app()
