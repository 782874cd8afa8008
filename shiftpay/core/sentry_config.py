# shiftpay/core/sentry_config.py
"""
Sentry configuration for error tracking in production.

Only unexpected failures reach Sentry; rejected input (InvalidInputError,
NoApplicableRateError) is answered with 4xx and stays out of it.
"""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from shiftpay.core.exceptions import PayrollError

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = ("cookie", "authorization", "x-api-key")


def init_sentry() -> bool:
    """
    Initialize Sentry error tracking.

    Returns:
        True if Sentry was initialized, False otherwise.
    """
    is_production = os.getenv("PRODUCTION", "false").lower() == "true"
    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()

    if not is_production:
        logger.info("Sentry disabled in development mode")
        return False

    if not sentry_dsn:
        logger.warning(
            "SENTRY_DSN not set. Error tracking disabled. "
            "Set SENTRY_DSN environment variable to enable Sentry in production."
        )
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")
    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=0.1,
        sample_rate=1.0,
        release=os.getenv("RELEASE_VERSION", "shiftpay@0.1.0"),
        environment=environment,
        send_default_pii=False,
        attach_stacktrace=True,
        before_send=before_send_hook,
    )

    logger.info("Sentry initialized (environment: %s)", environment)
    return True


def before_send_hook(event, hint):
    """
    Filter events before sending to Sentry.

    - Drops payroll input errors (they are client mistakes, not bugs)
    - Masks sensitive headers and query strings

    Returns:
        Modified event or None to drop the event
    """
    exc_info = (hint or {}).get("exc_info")
    if exc_info and isinstance(exc_info[1], PayrollError):
        return None

    request = event.get("request")
    if request:
        headers = request.get("headers")
        if headers:
            for header in SENSITIVE_HEADERS:
                if header in headers:
                    headers[header] = "[Filtered]"

        query = request.get("query_string")
        if query and ("password" in query.lower() or "token" in query.lower()):
            request["query_string"] = "[Filtered]"

    return event
