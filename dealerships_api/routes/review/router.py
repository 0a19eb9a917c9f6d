import json
import logging
from fastapi import APIRouter, Depends, Request
from dealerships_api.database.db import get_database, review_collection
from dealerships_api.models.review.review import Review, ReviewIn
from dealerships_api.services.json import return_json, return_error_json
from dealerships_api.utilities.helper import get_next_review_id
from dealerships_api.utilities.parsing import fits_int64

logger = logging.getLogger(__name__)

review_router = APIRouter(
    tags=["ReviewAPI"],
)


# List all reviews
@review_router.get("/fetchReviews")
async def fetch_reviews(db=Depends(get_database)):
    try:
        documents = await review_collection(db).find().to_list(None)
        return return_json(documents)
    except Exception:
        logger.exception("Error fetching reviews")
        return return_error_json("Error fetching documents")


# List reviews of one dealership
@review_router.get("/fetchReviews/dealer/{dealer_id}")
async def fetch_dealer_reviews(dealer_id: str, db=Depends(get_database)):
    try:
        # Cast to the stored type the same way the review schema does
        dealership = Review.model_validate({"id": 0, "dealership": dealer_id}).dealership
        if not fits_int64(dealership):
            # No stored document can hold this value
            return return_json([])
        documents = await review_collection(db).find({"dealership": dealership}).to_list(None)
        return return_json(documents)
    except Exception:
        logger.exception("Error fetching reviews for dealer %s", dealer_id)
        return return_error_json("Error fetching documents")


# Add a review, the body is read raw whatever its content type
@review_router.post("/insert_review")
async def insert_review(request: Request, db=Depends(get_database)):
    try:
        data = ReviewIn.model_validate(json.loads(await request.body()))
        review = Review(id=await get_next_review_id(db), **data.model_dump(exclude_unset=True))

        document = review.model_dump(exclude_unset=True)
        result = await review_collection(db).insert_one(document)
        document["_id"] = result.inserted_id
        return return_json(document)
    except Exception:
        logger.exception("Error inserting review")
        return return_error_json("Error inserting review")
