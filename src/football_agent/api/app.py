"""FastAPI backend for the Football Intelligence Agent."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from football_agent import __version__
from football_agent.config.settings import Settings, settings as default_settings
from football_agent.core.llm_client import LLMClient
from football_agent.core.logging import get_logger, setup_logging
from football_agent.core.metrics import metrics
from football_agent.core.middleware import ObservabilityMiddleware
from football_agent.core.schemas import (
    MISSING_QUERY_MESSAGE,
    QUERY_TOO_LONG_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    UPSTREAM_UNAVAILABLE_MESSAGE,
    AskRequest,
    AskResponse,
    ErrorResponse,
)
from football_agent.data.loader import get_dataset
from football_agent.llm.generate import LLMUnavailableError
from football_agent.orchestrator import FootballAgent
from football_agent.prompts_loader import load_prompt

SERVICE_NAME = "football-intelligence-agent"

logger = get_logger(__name__)


def build_agent(settings: Settings) -> FootballAgent:
    """Wire the agent from settings: dataset, prompt and LLM client."""
    prompts = load_prompt(settings.prompt_version)
    return FootballAgent(
        dataset=get_dataset(settings.dataset_path),
        llm=LLMClient.from_settings(settings),
        system_prompt=prompts["system"],
        user_template=prompts["user_template"],
    )


def _error(
    status_code: int, message: str, exc: Optional[Exception], settings: Settings
) -> JSONResponse:
    details = None if settings.is_production or exc is None else str(exc)
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    settings: Optional[Settings] = None, agent: Optional[FootballAgent] = None
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title="Football Intelligence Agent", version=__version__)
    app.state.settings = settings
    app.state.agent = agent or build_agent(settings)

    app.add_middleware(ObservabilityMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.info(f"Rejected malformed request: {[e.get('type') for e in errors]}")
        if any(e.get("type") == "string_too_long" for e in errors):
            return _error(400, QUERY_TOO_LONG_MESSAGE, None, settings)
        return _error(400, MISSING_QUERY_MESSAGE, None, settings)

    @app.post(
        "/ask",
        response_model=AskResponse,
        responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    )
    def ask(payload: AskRequest, request: Request):
        if not payload.has_query():
            return _error(400, MISSING_QUERY_MESSAGE, None, settings)

        agent: FootballAgent = request.app.state.agent
        logger.info("Received query", extra={"query_length": len(payload.query)})
        try:
            result = agent.ask(payload.query)
        except LLMUnavailableError as e:
            metrics.increment_upstream_failures()
            logger.error(f"Upstream LLM unavailable: {e}", exc_info=True)
            return _error(503, UPSTREAM_UNAVAILABLE_MESSAGE, e, settings)
        except Exception as e:
            logger.error(f"Error processing request: {e}", exc_info=True)
            return _error(500, UNEXPECTED_ERROR_MESSAGE, e, settings)

        metrics.record_intent(result.metadata.intent)
        return result

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "service": SERVICE_NAME})

    @app.get("/metrics")
    async def get_metrics() -> JSONResponse:
        """Metrics endpoint."""
        return JSONResponse(metrics.snapshot())

    return app


app = create_app()
