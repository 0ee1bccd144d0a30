"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ValidationConfig(BaseSettings):
    """Payment identifier validation behaviour."""

    model_config = {"env_prefix": "PAYVALID_VALIDATION_"}

    log_rejections: bool = True  # DEBUG line per rejected candidate


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PAYVALID_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    validation: ValidationConfig = ValidationConfig()
