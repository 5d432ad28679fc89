"""Logfire setup for the Explora API and scripts.

Code outside this module uses logfire directly, e.g.::

    logfire.info("Location verified", location_id=location.id)

    with logfire.span("quality_service.build_report", count=len(locations)):
        ...
"""

import logfire
from fastapi import FastAPI

from explora.config import ObservabilitySettings, Settings

SERVICE_NAME = "explora-backend"

# Probes hit this every few seconds and would drown the request traces
UNTRACED_URLS = "/health"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise sending is enabled
    exactly when a Logfire token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created."""
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        city_id=settings.catalog.city_id,
    )


def _request_attributes(request, attributes):
    # Keep only what is useful for browsing traces by route
    return {
        **attributes,
        "method": getattr(request, "method", None),
        "path": request.url.path if hasattr(request, "url") else None,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per API request, health checks excepted."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )
