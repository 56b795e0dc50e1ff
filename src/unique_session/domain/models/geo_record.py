"""Geo lookup result domain model."""

from pydantic import BaseModel, ConfigDict


class GeoRecord(BaseModel):
    """Country information resolved for a client IP."""

    model_config = ConfigDict(frozen=True)

    country: str
    continent: str | None = None

    def __str__(self) -> str:
        return self.country
