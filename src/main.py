from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .platform.config import get_settings
from .platform.logger import setup_logger
from .platform.security import verify_api_key
from .routes.assessments import router as assessments_router
from .routes.evaluations import router as evaluations_router
from .routes.trainees import router as trainees_router


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    logger.info("Fitness assessment API started")
    yield


app: FastAPI = FastAPI(
    title="Fitness Assessment",
    version="1.0.0",
    description="Cooper-test performance evaluations for trainees stored in Notion",
    lifespan=lifespan,
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v1/api-schema")
async def get_api_schema(request: Request, _: Any = Depends(verify_api_key)) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    openapi_schema["servers"] = [{"url": str(request.base_url).rstrip("/")}]
    return JSONResponse(openapi_schema)


for router in (
    trainees_router,
    assessments_router,
    evaluations_router,
):
    app.include_router(router, prefix="/v1", dependencies=[Depends(verify_api_key)])
