import logging
from fastapi import APIRouter, FastAPI

logger = logging.getLogger(__name__)


def gather_routers(app: FastAPI, routers: list[APIRouter]) -> FastAPI:
    for router in routers:
        app.include_router(router)
        logger.debug("Registered %d routes from %s", len(router.routes), router.tags)
    return app
