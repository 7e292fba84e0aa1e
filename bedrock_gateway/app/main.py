from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from bedrock_gateway.app.core.config import Settings
from bedrock_gateway.app.core.bedrock import InferenceClient
from bedrock_gateway.app.core.metrics import Metrics
from bedrock_gateway.app.core.observability import ObservabilityMiddleware
from bedrock_gateway.app.api import health, metrics, prompt
import logging

logger = logging.getLogger(__name__)

INVALID_METHOD = "Invalid request method"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    detail = INVALID_METHOD if exc.status_code == 405 else str(exc.detail)
    return PlainTextResponse(
        detail,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings, inference_client: InferenceClient) -> FastAPI:
    """Build the gateway around an already constructed inference client."""
    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.inference_client = inference_client
    app.state.metrics = Metrics()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ObservabilityMiddleware, metrics=app.state.metrics)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health.router)
    app.include_router(prompt.router)
    app.include_router(metrics.router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Region: {settings.aws_region or 'unset'}")
        logger.info(f"Listening on {settings.host}:{settings.port}")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info(f"Shutting down {settings.app_name}")

    return app
