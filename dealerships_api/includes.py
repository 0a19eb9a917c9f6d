from dealerships_api.routes.review.router import review_router as review
from dealerships_api.routes.dealership.router import dealership_router as dealership


def get_all_routers():
    return [
        review,
        dealership,
    ]
