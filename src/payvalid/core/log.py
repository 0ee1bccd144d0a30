"""Logging setup and log-safe rendering of payment identifiers."""

from __future__ import annotations

import logging

from payvalid.core.config import AppSettings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root logging from application settings."""
    if settings is None:
        settings = AppSettings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def mask_identifier(value: object) -> str:
    """Mask an identifier for logs, keeping only the first four characters.

    None or non-string values render as a placeholder.
    """
    if not isinstance(value, str):
        return "<none>" if value is None else f"<{type(value).__name__}>"
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 4)}"
