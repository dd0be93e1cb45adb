# app/api/cities.py

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Path as PathParam
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.data.loader import load_records
from app.data.queries import list_cities, list_states
from app.errors import DatasetError
from app.models.cities import CitiesResponse, ErrorResponse, StatesResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cities"])


def get_data_file() -> Path:
    return settings.data_path()


def _error_response(message: str) -> JSONResponse:
    body = ErrorResponse(status_code=500, message=message, data=[])
    return JSONResponse(status_code=500, content=body.model_dump())


@router.get(
    "/states",
    response_model=StatesResponse,
    summary="Get states list",
    responses={500: {"model": ErrorResponse, "description": "Error loading states"}},
)
@router.head("/states", include_in_schema=False)
def get_states(data_file: Path = Depends(get_data_file)):
    """
    Return every distinct state in the dataset, in order of first appearance.
    """
    try:
        records = load_records(data_file)
    except DatasetError:
        logger.exception("Error loading states")
        return _error_response("Error loading states")

    return StatesResponse(data=list_states(records))


@router.get(
    "/cities/{id}",
    response_model=CitiesResponse,
    summary="Get cities list by state code",
    responses={500: {"model": ErrorResponse, "description": "Error loading cities"}},
)
@router.head("/cities/{id}", include_in_schema=False)
def get_cities(
    id: str = PathParam(..., description="State code whose cities are listed, e.g. 05"),
    data_file: Path = Depends(get_data_file),
):
    """
    Return the cities of one state in dataset order. Unknown state codes
    give an empty list.
    """
    try:
        records = load_records(data_file)
    except DatasetError:
        logger.exception("Error loading cities for state %r", id)
        return _error_response("Error loading cities")

    return CitiesResponse(data=list_cities(records, id))
