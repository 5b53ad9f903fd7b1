from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.positions import router as positions_router
from src.adapters.config import DatagenRuntimeConfig
from src.domain.exceptions import DatagenError

app = FastAPI(title="Datagen positions")
app.include_router(positions_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return unhandled errors as JSON instead of Starlette's plain-text 500."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    try:
        reveal = DatagenRuntimeConfig.from_env().reveal_errors
    except RuntimeError:
        reveal = False

    if reveal or isinstance(exc, (DatagenError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
