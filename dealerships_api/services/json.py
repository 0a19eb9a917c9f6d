from fastapi.responses import JSONResponse
from fastapi import status
from dealerships_api.utilities.convert_object_id import convert_object_ids


def return_json(data=None, code: int = status.HTTP_200_OK):
    return JSONResponse(status_code=code, content=convert_object_ids(data))


def return_error_json(error: str = "Error", code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
    return JSONResponse(status_code=code, content={"error": error})


def return_not_found_json(message: str):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})
