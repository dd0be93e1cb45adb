# app/models/cities.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CityRecord(BaseModel):
    """
    One entry of the dataset file. Field aliases are the keys used in the
    JSON file (DANE codes).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    state_code: str = Field(..., alias="state_dane_code", min_length=1)
    state_name: str = Field(..., alias="state")
    city_code: str = Field(..., alias="city_dane_code", min_length=1)
    city_name: str = Field(..., alias="city")


class StateSummary(BaseModel):
    id: str = Field(..., examples=["05"])
    state: str = Field(..., examples=["Antioquia"])


class CitySummary(BaseModel):
    id: str = Field(..., examples=["05001"])
    city: str = Field(..., examples=["Medellín"])


class StatesResponse(BaseModel):
    status_code: int = 200
    message: str = "success"
    data: List[StateSummary]


class CitiesResponse(BaseModel):
    status_code: int = 200
    message: str = "success"
    data: List[CitySummary]


class ErrorResponse(BaseModel):
    status_code: int = Field(500, examples=[500])
    message: str = Field(..., examples=["Error loading states"])
    data: List[dict] = Field(default_factory=list)
