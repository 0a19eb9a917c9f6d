from pydantic import BaseModel, ConfigDict
from typing import Optional


class Review(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: int
    name: Optional[str] = None
    dealership: Optional[int] = None
    review: Optional[str] = None
    purchase: Optional[bool] = None
    purchase_date: Optional[str] = None
    car_make: Optional[str] = None
    car_model: Optional[str] = None
    car_year: Optional[int] = None


# Body of POST /insert_review, the id is allocated server side
class ReviewIn(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    dealership: Optional[int] = None
    review: Optional[str] = None
    purchase: Optional[bool] = None
    purchase_date: Optional[str] = None
    car_make: Optional[str] = None
    car_model: Optional[str] = None
    car_year: Optional[int] = None
