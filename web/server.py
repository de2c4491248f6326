"""HTTP API - FastAPI app serving the summary views."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import Container
from app.container import container as default_container
from app.services import SummaryService
from settings import CORS_ORIGINS
from web.api import summary
from web.api.errors import ServiceUnavailableError
from web.api.summary.schemas import BillSummaryItem, HealthResponse, LegislatorSummaryItem


def get_summary_service(request: Request) -> SummaryService:
    return request.app.state.container.summary


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around a container; load errors abort startup."""
    container = container or default_container

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        t0 = time.perf_counter()
        container.init()
        logger.info("API ready in {:.0f}ms", (time.perf_counter() - t0) * 1000)
        yield

    app = FastAPI(title="Vote Summaries", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _request_logging_middleware(request: Request, call_next) -> Response:
        t0 = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.info("{} {} -> {} ({:.1f}ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    @app.exception_handler(ServiceUnavailableError)
    async def _unavailable_handler(_request: Request, exc: ServiceUnavailableError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": exc.message})

    @app.get("/api/summary/legislators", response_model=list[LegislatorSummaryItem])
    def legislator_summaries(service: SummaryService = Depends(get_summary_service)):
        return summary.get_legislator_summaries(service)

    @app.get("/api/summary/bills", response_model=list[BillSummaryItem])
    def bill_summaries(service: SummaryService = Depends(get_summary_service)):
        return summary.get_bill_summaries(service)

    @app.get("/api/health", response_model=HealthResponse)
    def health(service: SummaryService = Depends(get_summary_service)):
        return summary.get_health(service)

    return app
