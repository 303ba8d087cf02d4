from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from catering.domain.errors import DateParseError, LookupMiss, MenuSourceError
from catering.logic.menu_service import get_menu_service
from catering.utilities.constants import (
    INVALID_DATE_MESSAGE,
    NOT_FOUND_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
)

# Routers
from catering.api.routes import meal, menu

# Logging
logger = logging.getLogger("catering_app")

# Initialize FastAPI app
app = FastAPI(title="Catering Menu API")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# Include routers
app.include_router(meal.router)
app.include_router(menu.router)


@app.on_event("shutdown")
async def _close_menu_client():
    """Close the upstream HTTP client if the service was ever created."""
    if get_menu_service.cache_info().currsize:
        await get_menu_service().repository.aclose()
        logger.info("Menu repository client closed")


# -------------------- Error mapping --------------------
@app.exception_handler(DateParseError)
async def _date_parse_error(request: Request, exc: DateParseError):
    return JSONResponse(status_code=400, content={"error": INVALID_DATE_MESSAGE})


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc):
    fields = ", ".join(str(err["loc"][-1]) for err in exc.errors() if err.get("loc"))
    return JSONResponse(status_code=400, content={"error": f"Invalid query parameters: {fields}"})


@app.exception_handler(LookupMiss)
async def _lookup_miss(request: Request, exc: LookupMiss):
    return JSONResponse(
        status_code=404,
        content={"error": NOT_FOUND_MESSAGE.format(date=exc.date_key, period=exc.period)},
    )


@app.exception_handler(MenuSourceError)
async def _menu_source_error(request: Request, exc: MenuSourceError):
    logger.error("Upstream menu fetch failed: %s", exc)
    return JSONResponse(status_code=502, content={"error": UPSTREAM_ERROR_MESSAGE.format(error=exc)})


@app.get("/health")
def health():
    return {"status": "ok"}
