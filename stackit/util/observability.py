"""Logfire setup for the API process.

Domain services log through ``logfire`` directly:

    logfire.info("Answer accepted", question_id=str(question.id))

    with logfire.span("acceptance_service.accept", answer_id=str(answer_id)):
        ...

This module only configures the SDK and instruments the frameworks.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from stackit.config import Settings

# Attribute names whose values never leave the process
SCRUBBED_FIELDS = ["password_hash", "auth_token", "jwt_secret"]

# Polled by load balancers, not worth a trace each
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire from the observability settings.

    Telemetry is sent to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    says so, otherwise whenever ``OBSERVABILITY__LOGFIRE_TOKEN`` is set.
    Without a token everything stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        token=observability.logfire_token,
        service_name="stackit-backend",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Attach method, path and client host to request spans.

    WebSocket requests have no method.
    """
    result = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    if method:
        result["method"] = method
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests and the notification WebSocket.

    Headers are not captured since they carry bearer tokens and cookies.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
