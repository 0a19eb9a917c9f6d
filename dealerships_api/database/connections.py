import asyncio
from contextlib import asynccontextmanager, suppress
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import errors
from config import (
    DATABASE_URL,
    DATABASE_NAME,
    SERVER_SELECTION_TIMEOUT_MS,
    REVIEWS_FILE,
    DEALERSHIPS_FILE,
    SEED_ON_STARTUP,
    WAIT_FOR_SEED,
)
from dealerships_api.migration.seed import load_fixtures, seed_database

logger = logging.getLogger(__name__)
db_config = {
    "db_url": DATABASE_URL,
}


class DatabaseConnectionError(RuntimeError):
    """Raised when the document store cannot be reached at startup."""


async def connect(db_url: str = None):
    client = AsyncIOMotorClient(
        db_url or db_config["db_url"],
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        await client.admin.command("ping")
        return client
    except errors.ConfigurationError as err:
        client.close()
        raise DatabaseConnectionError("Invalid MongoDB configuration.") from err
    except errors.ConnectionFailure as err:
        client.close()
        raise DatabaseConnectionError("Unable to connect to the MongoDB server.") from err
    except errors.OperationFailure as err:
        client.close()
        raise DatabaseConnectionError(f"Authentication or command error: {err}") from err


@asynccontextmanager
async def lifespan(app):
    """Async context manager for MongoDB connection and seeding lifecycle"""
    options = app.state.startup_options

    # Fixtures are read first, a missing or broken file stops startup
    fixtures = None
    if options["seed"]:
        fixtures = load_fixtures(options["reviews_file"], options["dealerships_file"])

    connection = options["mongo_client"]
    owns_connection = connection is None
    if owns_connection:
        try:
            connection = await connect(options["db_url"])
        except Exception as e:
            logger.error(f"❌ MongoDB connection failed at startup: {e}")
            raise
        logger.info("✅ MongoDB connection established successfully at startup.")

    app.state.mongo_client = connection
    app.state.db = connection[options["db_name"]]

    app.state.seed_task = None
    if fixtures is not None:
        app.state.seed_task = asyncio.create_task(seed_database(app.state.db, fixtures))
        if options["wait_for_seed"]:
            await app.state.seed_task

    yield  # FastAPI app runs here

    seed_task = app.state.seed_task
    if seed_task is not None and not seed_task.done():
        seed_task.cancel()
        with suppress(asyncio.CancelledError):
            await seed_task
        logger.warning("Seeding still running at shutdown, cancelled.")
    if owns_connection:
        connection.close()
        logger.info("🔌 MongoDB connection closed at shutdown.")
    logger.info("🚪 Shutting down FastAPI app.")


def default_startup_options(**overrides):
    options = {
        "db_url": DATABASE_URL,
        "db_name": DATABASE_NAME,
        "mongo_client": None,
        "seed": SEED_ON_STARTUP,
        "wait_for_seed": WAIT_FOR_SEED,
        "reviews_file": REVIEWS_FILE,
        "dealerships_file": DEALERSHIPS_FILE,
    }
    options.update(overrides)
    return options
