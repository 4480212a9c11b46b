"""FastAPI dependencies for resolving the claim hook."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request

from fabric_claims.hook._hook import FabricClaimHook

__all__ = ["configure_claim_hook", "get_claim_hook"]

HookCallable = Callable[[Any, Any], None]


def get_claim_hook(request: Request) -> HookCallable:
    """Dependency returning the hook configured on the app.

    Falls back to a ``FabricClaimHook`` bound to the global config when
    nothing was configured. Override via
    ``app.dependency_overrides[get_claim_hook]`` in tests.

    Example::

        app.dependency_overrides[get_claim_hook] = lambda: my_hook
    """
    hook: HookCallable | None = getattr(request.app.state, "fabric_claims_hook", None)
    if hook is None:
        return FabricClaimHook()
    return hook


def configure_claim_hook(app: FastAPI, hook: HookCallable) -> None:
    """Store *hook* on the app state for ``get_claim_hook``.

    Example::

        configure_claim_hook(app, FabricClaimHook(EnrollmentConfig(affiliation="org2")))
    """
    app.state.fabric_claims_hook = hook
