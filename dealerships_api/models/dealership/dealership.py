from pydantic import BaseModel, ConfigDict


class Dealership(BaseModel):
    # Only the looked-up fields are typed, the rest are stored as they come
    model_config = ConfigDict(extra="allow")

    id: int
    state: str
