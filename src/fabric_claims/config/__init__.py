"""Configuration module for fabric-claims."""

from __future__ import annotations

from fabric_claims.config._config import (
    EnrollmentConfig,
    configure,
    get_global_config,
)
from fabric_claims.config._settings import EnrollmentSettings, config_from_env

__all__ = [
    "EnrollmentConfig",
    "EnrollmentSettings",
    "config_from_env",
    "configure",
    "get_global_config",
]
