from pymongo import DESCENDING, ReturnDocument
from config import REVIEW_COLLECTION
from dealerships_api.database.db import review_collection, counter_collection


async def get_last_review_id(db):
    last_doc = await review_collection(db).find_one(
        {"id": {"$exists": True}}, sort=[("id", DESCENDING)]
    )
    if last_doc:
        return last_doc["id"]
    return 0


async def get_next_review_id(db):
    """Allocate the next review id.

    The counter is first raised to the highest stored id, so it heals when the
    collection was filled without going through the seeder. The increment
    itself is a single atomic update, two callers never get the same value.
    """
    counters = counter_collection(db)
    await counters.update_one(
        {"_id": REVIEW_COLLECTION},
        {"$max": {"seq": await get_last_review_id(db)}},
        upsert=True,
    )
    counter = await counters.find_one_and_update(
        {"_id": REVIEW_COLLECTION},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["seq"]
