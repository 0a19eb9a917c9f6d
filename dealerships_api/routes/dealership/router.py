import logging
from fastapi import APIRouter, Depends
from dealerships_api.database.db import get_database, dealership_collection
from dealerships_api.services.json import return_json, return_error_json, return_not_found_json
from dealerships_api.utilities.parsing import parse_int_prefix, state_pattern

logger = logging.getLogger(__name__)

dealership_router = APIRouter(
    tags=["DealershipAPI"],
)


# List all dealerships
@dealership_router.get("/fetchDealers")
async def fetch_dealers(db=Depends(get_database)):
    try:
        documents = await dealership_collection(db).find().to_list(None)
        return return_json(documents)
    except Exception:
        logger.exception("Error fetching dealerships")
        return return_error_json("Error fetching documents")


# List dealerships of a state, case-insensitive
@dealership_router.get("/fetchDealers/{state}")
async def fetch_dealers_by_state(state: str, db=Depends(get_database)):
    try:
        query = {"state": {"$regex": state_pattern(state), "$options": "i"}}
        dealers = await dealership_collection(db).find(query).to_list(None)

        if not dealers:
            return return_not_found_json(f"No dealerships found in state '{state}'")

        return return_json(dealers)
    except Exception:
        logger.exception("Error fetching dealers by state %r", state)
        return return_error_json("Error fetching dealers by state")


# Get a dealership using its numeric id
@dealership_router.get("/fetchDealer/{dealer_id}")
async def fetch_dealer(dealer_id: str, db=Depends(get_database)):
    try:
        parsed_id = parse_int_prefix(dealer_id)
        if parsed_id is None:
            return return_not_found_json(f"Dealer with id {dealer_id} not found")

        dealer = await dealership_collection(db).find_one({"id": parsed_id})
        if not dealer:
            return return_not_found_json(f"Dealer with id {parsed_id} not found")

        return return_json(dealer)
    except Exception:
        logger.exception("Error fetching dealer by id %s", dealer_id)
        return return_error_json("Error fetching dealer by id")
