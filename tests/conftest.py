"""Shared test fixtures for fabric-claims tests."""

from __future__ import annotations

# Also registered through the pytest11 entry point when installed.
from fabric_claims.testing._fixtures import (  # noqa: F401
    claims_api,
    enrollment_config,
    isolated_config_state,
)
