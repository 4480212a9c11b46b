"""FastAPI integration for fabric-claims."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install fabric-claims[fastapi]"
    ) from exc

from fabric_claims.integrations.fastapi._dependencies import (
    configure_claim_hook,
    get_claim_hook,
)
from fabric_claims.integrations.fastapi._errors import install_error_handlers
from fabric_claims.integrations.fastapi._router import DEFAULT_ACTION_PATH, create_claims_router

__all__ = [
    "DEFAULT_ACTION_PATH",
    "configure_claim_hook",
    "create_claims_router",
    "get_claim_hook",
    "install_error_handlers",
]
