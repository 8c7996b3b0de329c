from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.bookmarks import router as bookmarks_router
from src.adapters.api.controllers.stops import router as stops_router
from src.adapters.api.controllers.trips import router as trips_router
from src.domain.exceptions import (
    SelectionIncompleteError,
    TimetableDataUnavailableError,
    UnknownStopError,
)

app = FastAPI(title="Bus Timetable")
app.include_router(stops_router)
app.include_router(trips_router)
app.include_router(bookmarks_router)


@app.exception_handler(TimetableDataUnavailableError)
async def timetable_unavailable_handler(
    request: Request, exc: TimetableDataUnavailableError
) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(UnknownStopError)
async def unknown_stop_handler(request: Request, exc: UnknownStopError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(SelectionIncompleteError)
async def selection_incomplete_handler(
    request: Request, exc: SelectionIncompleteError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so clients can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TIMETABLE_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
