from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PositionGeneratorConfig(BaseModel):
    """Field config for a coordinates generator.

    Corners are ``[longitude, latitude]``. Wrong lengths or reversed corners
    are not rejected here; the generator falls back to the whole earth.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["coordinates"] = "coordinates"
    top_left: list[float] | None = Field(default=None, alias="topLeft")
    bottom_right: list[float] | None = Field(default=None, alias="bottomRight")


class BoundingBoxSchema(BaseModel):
    top_left: list[float]
    bottom_right: list[float]
    whole_earth: bool


class SampleRequestSchema(BaseModel):
    generator: PositionGeneratorConfig = Field(default_factory=PositionGeneratorConfig)
    count: int = Field(1, ge=1)
    seed: int | None = Field(default=None, ge=0)
    format: Literal["text", "bson"] = "text"


class PositionValueSchema(BaseModel):
    value: str
    lon: float
    lat: float


class SampleResponseSchema(BaseModel):
    format: Literal["text", "bson"]
    seed: int
    box: BoundingBoxSchema
    values: list[PositionValueSchema] = []
