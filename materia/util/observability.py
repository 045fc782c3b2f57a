"""Logfire setup for the Materia API.

Services open a span per operation and emit structured events inside it:

    with logfire.span("tag_service.update_tag", tag_id=str(tag_id)):
        ...
        logfire.info("Tag updated", tag_id=str(tag_id))

HTTP requests and SQL statements are traced by the instrumentations below.
Session tokens and uploaded file contents are scrubbed from every record.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from materia.config import ObservabilitySettings, Settings

SERVICE_NAME = "materia-api"

# Attribute names whose values never leave the process
SCRUBBED_ATTRIBUTES = ["session_token", "content"]


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Whether records go to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise records are sent when a
    token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            span_style="indented",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # Only identifiers are kept: bodies may carry file contents
    values = attributes.get("values") or {}
    return {
        "method": request.method,
        "path": request.url.path,
        **{name: str(value) for name, value in values.items() if name.endswith("_id")},
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request of the app. Headers, and so cookies, are not captured."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements run by an engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
