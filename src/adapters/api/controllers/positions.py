from __future__ import annotations

import bson
from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_runtime_config, get_sampling_service
from src.adapters.api.schemas.positions import (
    BoundingBoxSchema,
    PositionValueSchema,
    SampleRequestSchema,
    SampleResponseSchema,
)
from src.adapters.config import DatagenRuntimeConfig
from src.app.services.position_sampling_service import PositionSamplingService
from src.domain.exceptions import InvalidGeneratorConfig

router = APIRouter(tags=["positions"])


def _text_value(raw: bytes) -> PositionValueSchema:
    text = raw.decode("ascii")
    lon, lat = text[1:-1].split(",")
    return PositionValueSchema(value=text, lon=float(lon), lat=float(lat))


def _bson_value(raw: bytes) -> PositionValueSchema:
    # The sub-document is a complete BSON document on its own.
    doc = bson.decode(raw)
    return PositionValueSchema(value=raw.hex(), lon=doc["0"], lat=doc["1"])


@router.post("/positions/sample", response_model=SampleResponseSchema)
def sample_positions(
    req: SampleRequestSchema,
    service: PositionSamplingService = Depends(get_sampling_service),
    cfg: DatagenRuntimeConfig = Depends(get_runtime_config),
) -> SampleResponseSchema:
    seed = cfg.seed if req.seed is None else req.seed
    try:
        batch = service.sample(
            count=req.count,
            seed=seed,
            output_format=req.format,
            top_left=req.generator.top_left,
            bottom_right=req.generator.bottom_right,
        )
    except InvalidGeneratorConfig as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    decode = _text_value if req.format == "text" else _bson_value
    return SampleResponseSchema(
        format=req.format,
        seed=seed,
        box=BoundingBoxSchema(
            top_left=list(batch.box.top_left),
            bottom_right=list(batch.box.bottom_right),
            whole_earth=batch.box.is_whole_earth,
        ),
        values=[decode(raw) for raw in batch.values],
    )
