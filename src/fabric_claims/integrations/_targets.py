"""Shared plumbing for exposing the hook as an HTTP action target."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fabric_claims.exceptions import InvalidContextError

__all__ = ["AppendClaimsApi", "run_action"]


class _ClaimsCollector:
    def __init__(self) -> None:
        self.items: list[dict[str, Any]] = []

    def set_claim(self, key: str, value: Any) -> None:
        self.items.append({"key": key, "value": value})


class AppendClaimsApi:
    """Host API stand-in that renders claims as an ``append_claims`` response.

    Identity providers that call actions over HTTP accept a JSON response
    listing the claims to add. Claims are kept in the order they were set.

    Example::

        api = AppendClaimsApi()
        set_fabric_claim(ctx, api)
        api.to_response()
        # {"append_claims": [{"key": "fabric", "value": {...}}]}
    """

    def __init__(self) -> None:
        self._claims = _ClaimsCollector()

    @property
    def claims(self) -> _ClaimsCollector:
        return self._claims

    def to_response(self) -> dict[str, Any]:
        """Return a JSON-serializable ``append_claims`` body."""
        return {"append_claims": [dict(item) for item in self._claims.items]}


def run_action(hook: Callable[[Any, Any], None], ctx: Any) -> dict[str, Any]:
    """Run *hook* against a decoded JSON context and return the response body.

    Args:
        hook: A ``(ctx, api) -> None`` hook such as ``FabricClaimHook()``.
        ctx: The decoded request body.

    Raises:
        InvalidContextError: If *ctx* is not a JSON object.
    """
    if not isinstance(ctx, dict):
        raise InvalidContextError(received=type(ctx).__name__)
    api = AppendClaimsApi()
    hook(ctx, api)
    return api.to_response()
