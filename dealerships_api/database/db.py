from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from config import (
    REVIEW_COLLECTION,
    DEALERSHIP_COLLECTION,
    COUNTER_COLLECTION,
)


def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db


def review_collection(db):
    return db[REVIEW_COLLECTION]


def dealership_collection(db):
    return db[DEALERSHIP_COLLECTION]


def counter_collection(db):
    return db[COUNTER_COLLECTION]
