"""Advanced paste service entrypoint - local gateway to the completions helper."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from advanced_paste.api.routes import router
from advanced_paste.api.schemas import HealthResponse
from advanced_paste.client import MockCompletionClient
from advanced_paste.config import AdvancedPasteSettings
from advanced_paste.credentials import InMemoryCredentialProvider
from advanced_paste.helper import AICompletionsHelper
from advanced_paste.logging import configure_logging
from advanced_paste.middleware import RequestContextMiddleware
from advanced_paste.telemetry import (
    LoggingTelemetrySink,
    MultiTelemetrySink,
    PrometheusTelemetrySink,
)

SERVICE_NAME = "advanced-paste"

_settings: AdvancedPasteSettings | None = None


def get_settings() -> AdvancedPasteSettings:
    global _settings
    if _settings is None:
        _settings = AdvancedPasteSettings()
    return _settings


def build_helper(settings: AdvancedPasteSettings) -> AICompletionsHelper:
    telemetry = MultiTelemetrySink(LoggingTelemetrySink(), PrometheusTelemetrySink())
    if settings.mock:
        credentials = InMemoryCredentialProvider()
        credentials.store(settings.credential_resource, settings.credential_username, "mock-key")
        return AICompletionsHelper(
            client=MockCompletionClient(),
            telemetry=telemetry,
            credential_provider=credentials,
            settings=settings,
        )
    return AICompletionsHelper(telemetry=telemetry, settings=settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if getattr(app.state, "helper", None) is None:
        app.state.helper = build_helper(settings)
    if not app.state.helper.is_enabled:
        structlog.get_logger().warning(
            "ai_disabled",
            msg="No API key found in the credential store; /format will return 401.",
            resource=settings.credential_resource,
        )
    yield


def create_app(helper: AICompletionsHelper | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(json_logs=settings.json_logs)
    app = FastAPI(title="Advanced Paste Service", version="0.1.0", lifespan=lifespan)
    app.state.helper = helper
    app.add_middleware(RequestContextMiddleware)

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service=SERVICE_NAME)

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        status = "ok" if app.state.helper.is_enabled else "degraded"
        return HealthResponse(status=status, service=SERVICE_NAME)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "advanced_paste.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
