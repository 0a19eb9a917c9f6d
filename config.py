import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


# Database
DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://mongo_db:27017/")
DATABASE_NAME = os.getenv("DATABASE_NAME", "dealershipsDB")
SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("SERVER_SELECTION_TIMEOUT_MS", "5000"))

# Collections
REVIEW_COLLECTION = os.getenv("REVIEW_COLLECTION", "reviews")
DEALERSHIP_COLLECTION = os.getenv("DEALERSHIP_COLLECTION", "dealerships")
COUNTER_COLLECTION = os.getenv("COUNTER_COLLECTION", "counters")

# Fixtures
REVIEWS_FILE = os.getenv("REVIEWS_FILE", "reviews.json")
DEALERSHIPS_FILE = os.getenv("DEALERSHIPS_FILE", "dealerships.json")
SEED_ON_STARTUP = _flag("SEED_ON_STARTUP", True)
WAIT_FOR_SEED = _flag("WAIT_FOR_SEED", False)

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3030"))
