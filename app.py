from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from integrations.google_maps import get_gmap_client
from routers import ROUTERS
from utils.constants import validate_configuration
from utils.exceptions import ConfigurationError, FoodGuideError, InvalidRequest
from utils.logging import logger


@asynccontextmanager
async def lifespan(_) -> AsyncGenerator[None, Any]:
    """Lifespan event handler"""
    validate_configuration()
    try:
        get_gmap_client()
    except ValueError as e:
        raise ConfigurationError(f"Google Maps client could not be created: {e}") from e
    logger.info("Configuration validated, serving requests.")
    yield
    logger.info("Shutting down the application.")


async def foodguide_error_handler(_: Request, exc: FoodGuideError) -> JSONResponse:
    """Render domain errors as {"error": message}"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 instead of 422"""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body') or 'body'}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info(f"Rejected request to {request.url.path}: {details}")
    return await foodguide_error_handler(request, InvalidRequest(f"Invalid request: {details}"))


app = FastAPI(title="FoodGuide API", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.add_exception_handler(FoodGuideError, foodguide_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
for router in ROUTERS:
    app.include_router(router)
