"""Destination Schemas — weather document, URL and vocabulary checks.

Invariants:
    - continent is one of the Continent enum values (case-sensitive)
    - map_link starts with the Google Maps embed prefix
    - image starts with one of IMAGE_URL_PREFIXES
    - time_to_travel items are three-letter English month names
"""

from pydantic import field_validator

from trisog.core.domain_types import (
    Continent, TravelMonth, MAP_LINK_PREFIX, IMAGE_URL_PREFIXES,
)
from trisog.schemas.common import (
    NonNegativeInt, RequiredStr, ResponseModel, UpsertModel,
)


class WeatherPeriod(UpsertModel):
    min: float
    max: float


class Weather(UpsertModel):
    jan_feb: WeatherPeriod
    mar_apr: WeatherPeriod
    may_jun: WeatherPeriod
    jul_aug: WeatherPeriod
    sep_oct: WeatherPeriod
    nov_dec: WeatherPeriod


class DestinationUpsert(UpsertModel):
    name: RequiredStr
    about: RequiredStr
    continent: RequiredStr
    map_link: RequiredStr
    weather: Weather
    language: list[str]
    currency: RequiredStr
    area: NonNegativeInt
    population: NonNegativeInt
    time_zone: RequiredStr
    time_to_travel: list[str]
    image: RequiredStr

    @field_validator("continent")
    @classmethod
    def check_continent(cls, v: str) -> str:
        if v not in {c.value for c in Continent}:
            raise ValueError(
                "The continent field must be a valid continent name with the "
                "first letter capitalized. Valid options are: "
                + ", ".join(c.value for c in Continent) + ".",
            )
        return v

    @field_validator("map_link")
    @classmethod
    def check_map_link(cls, v: str) -> str:
        if not v.startswith(MAP_LINK_PREFIX):
            raise ValueError(f"The map_link must start with '{MAP_LINK_PREFIX}'")
        return v

    @field_validator("time_to_travel")
    @classmethod
    def check_months(cls, v: list[str]) -> list[str]:
        months = {m.value for m in TravelMonth}
        if any(item not in months for item in v):
            raise ValueError(
                "Each item in the time_to_travel array must be a valid "
                "three-letter month abbreviation in English. Valid options are: "
                + ", ".join(m.value for m in TravelMonth) + ".",
            )
        return v

    @field_validator("image")
    @classmethod
    def check_image_domain(cls, v: str) -> str:
        if not v.startswith(IMAGE_URL_PREFIXES):
            raise ValueError("The image URL must start with a valid domain")
        return v


class DestinationResponse(ResponseModel):
    id: str
    name: str
    about: str
    continent: str
    map_link: str
    weather: dict
    language: list[str]
    currency: str
    area: int
    population: int
    time_zone: str
    time_to_travel: list[str]
    image: str | None = None
    images: list[str]
    travel_count: int
