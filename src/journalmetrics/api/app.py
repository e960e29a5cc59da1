"""FastAPI application exposing the journal metrics report."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from journalmetrics.api.schemas import HealthResponse, serialize_records
from journalmetrics.config import Settings, get_settings
from journalmetrics.ingestion import DirectoryJournalLoader, JournalError, LoaderConfig
from journalmetrics.metrics.observability import bind_correlation_id, clear_correlation_id, configure_logging, get_logger
from journalmetrics.services.report import ReportService


@dataclass(frozen=True)
class AppDependencies:
    loader: DirectoryJournalLoader
    report_service: ReportService


def _build_dependencies(settings: Settings) -> AppDependencies:
    loader = DirectoryJournalLoader(
        settings.resolved_journal_dir,
        LoaderConfig(file_extension=settings.file_extension, encoding=settings.encoding),
    )
    return AppDependencies(loader=loader, report_service=ReportService(loader))


def create_app(*, settings: Settings | None = None, dependencies: AppDependencies | None = None) -> FastAPI:
    settings = settings or get_settings()
    deps = dependencies or _build_dependencies(settings)

    configure_logging(settings.log_level)
    logger = get_logger("api")
    app = FastAPI(title="journalmetrics API", version="0.1.0")
    app.state.dependencies = deps

    # Optional CORS
    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_allow_origins),
            allow_credentials=settings.cors_allow_credentials,
            allow_methods=list(settings.cors_allow_methods),
            allow_headers=list(settings.cors_allow_headers),
        )

    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next):  # type: ignore[override]
        correlation_id = request.headers.get("X-Request-ID", uuid4().hex)
        request.state.correlation_id = correlation_id
        bind_correlation_id(correlation_id)
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers["X-Correlation-ID"] = correlation_id
        return response

    @app.exception_handler(JournalError)
    async def handle_journal_error(request: Request, exc: JournalError) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", uuid4().hex)
        logger.error("report.error", correlation_id=correlation_id, detail=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "correlation_id": correlation_id},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", uuid4().hex)
        logger.error("unhandled.error", correlation_id=correlation_id, detail=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error", "correlation_id": correlation_id},
        )

    def get_dependencies(request: Request) -> AppDependencies:
        return request.app.state.dependencies

    def get_report_service(dep: AppDependencies = Depends(get_dependencies)) -> ReportService:
        return dep.report_service

    def get_loader(dep: AppDependencies = Depends(get_dependencies)) -> DirectoryJournalLoader:
        return dep.loader

    @app.get("/")
    def report(service: ReportService = Depends(get_report_service)) -> JSONResponse:
        records = service.build_report()
        return JSONResponse(content=serialize_records(records, extended=settings.include_extended_metrics))

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        from journalmetrics import __version__

        return HealthResponse(status="ok", version=__version__, environment=settings.environment)

    @app.head("/healthz")
    async def healthcheck_head() -> Response:
        return Response(status_code=status.HTTP_200_OK)

    @app.get("/livez")
    async def liveness() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/healthz/ready")
    async def readiness(loader: DirectoryJournalLoader = Depends(get_loader)) -> JSONResponse:
        if loader.directory.is_dir():
            return JSONResponse(content={"status": "ready"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "detail": f"Journal directory not found: {loader.directory}"},
        )

    return app


app = create_app()
