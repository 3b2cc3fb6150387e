"""Sentry error monitoring configuration."""

import os
import sentry_sdk
from dotenv import load_dotenv

from . import __version__


def init_sentry() -> bool:
    """Initialize Sentry error monitoring for the terminal game.

    Reads SENTRY_DSN and ENVIRONMENT from the environment (or a .env file).

    Returns:
        True if Sentry was initialized, False if DSN not configured.
    """
    load_dotenv()

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("ENVIRONMENT", "development"),
        release=f"magic-number@{__version__}",
        attach_stacktrace=True,
    )

    return True


def capture_exception(exception: Exception = None, **tags):
    """Capture an exception and send to Sentry.

    A no-op when Sentry has not been initialized.

    Args:
        exception: The exception to capture. If None, captures the current exception.
        **tags: Extra tags (e.g. command="play", max_number=63) attached to the event.
    """
    with sentry_sdk.new_scope() as scope:
        for key, value in tags.items():
            scope.set_tag(key, value)
        sentry_sdk.capture_exception(exception)
