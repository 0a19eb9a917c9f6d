import json
import logging
from pathlib import Path
from pymongo import IndexModel
from config import REVIEW_COLLECTION
from dealerships_api.database.db import review_collection, dealership_collection, counter_collection
from dealerships_api.models.dealership.dealership import Dealership
from dealerships_api.models.review.review import Review

logger = logging.getLogger(__name__)


class FixtureError(ValueError):
    """Raised when a fixture file does not hold the expected sequence."""


def _read_fixture(path, key):
    with open(Path(path), encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise FixtureError(f"{path}: expected an object with a '{key}' list")
    return data[key]


def load_fixtures(reviews_path, dealerships_path):
    """Read both fixture files. Any error here is fatal for startup."""
    return {
        "reviews": _read_fixture(reviews_path, "reviews"),
        "dealerships": _read_fixture(dealerships_path, "dealerships"),
    }


async def _reset_collection(collection, documents):
    await collection.delete_many({})
    if documents:
        await collection.insert_many(documents)
    await collection.create_indexes([IndexModel([("id", 1)], unique=True)])


async def seed_database(db, fixtures):
    """Reset both collections to exactly the fixture contents.

    Failures are logged and swallowed: the server keeps answering requests
    against whatever state the store was left in.
    """
    try:
        reviews = [
            Review.model_validate(doc).model_dump(exclude_unset=True)
            for doc in fixtures["reviews"]
        ]
        dealerships = [
            Dealership.model_validate(doc).model_dump(exclude_unset=True)
            for doc in fixtures["dealerships"]
        ]

        await _reset_collection(review_collection(db), reviews)
        await _reset_collection(dealership_collection(db), dealerships)

        # Review ids continue from the highest seeded one
        last_id = max((doc["id"] for doc in reviews), default=0)
        await counter_collection(db).update_one(
            {"_id": REVIEW_COLLECTION},
            {"$set": {"seq": last_id}},
            upsert=True,
        )

        logger.info(
            "Database populated successfully: %d reviews, %d dealerships.",
            len(reviews),
            len(dealerships),
        )
        return True
    except Exception:
        logger.exception("Error populating database")
        return False
