from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class EdgeSchema(BaseModel):
    origin: str
    destination: str
    price: float


class RouteLegSchema(BaseModel):
    origin: str
    destination: str
    price: float


class BestRouteRequestSchema(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def normalize_location(cls, value: object) -> object:
        # Location codes are matched case-sensitively; callers type them freely.
        if isinstance(value, str):
            return value.strip().upper()
        return value


class BestRouteSchema(BaseModel):
    origin: str
    destination: str
    path: list[str]
    cost: float
    legs: list[RouteLegSchema] = []
