from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi import status
import logging
from config import HOST, PORT
from dealerships_api.database.connections import lifespan, default_startup_options
from dealerships_api.includes import get_all_routers
from tools.routers import gather_routers


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(**startup_options) -> FastAPI:
    """Build the API.

    ``startup_options`` override the values read from ``config``, e.g.
    ``mongo_client`` to run against an already open client or
    ``wait_for_seed`` to hold startup until the collections are seeded.
    """
    app = FastAPI(
        title="Dealerships API",
        description="Dealership and review lookups backed by MongoDB",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.startup_options = default_startup_options(**startup_options)
    app = gather_routers(app, get_all_routers())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred."},
        )

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return "Welcome to the Dealerships API"

    return app


logger.info("🚀 Starting FastAPI application")
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
