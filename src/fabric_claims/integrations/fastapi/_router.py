"""APIRouter exposing the claim hook as an HTTP action target."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from fabric_claims.exceptions import InvalidContextError
from fabric_claims.integrations._targets import run_action
from fabric_claims.integrations.fastapi._dependencies import HookCallable, get_claim_hook

__all__ = ["DEFAULT_ACTION_PATH", "create_claims_router"]

DEFAULT_ACTION_PATH = "/actions/fabric-claim"


def create_claims_router(
    hook: HookCallable | None = None,
    *,
    path: str = DEFAULT_ACTION_PATH,
) -> APIRouter:
    """Build a router with a POST action target for the ``fabric`` claim.

    The identity provider posts the action context as a JSON object; the
    response lists the claims to append::

        {"append_claims": [{"key": "fabric", "value": {...}}]}

    Args:
        hook: Hook to run. When ``None`` the hook is resolved per request
            via the ``get_claim_hook`` dependency.
        path: Route path for the action target.

    Returns:
        An ``APIRouter`` to include in the application.

    Example::

        app = FastAPI()
        install_error_handlers(app)
        app.include_router(create_claims_router())
    """
    router = APIRouter()

    @router.post(path)
    async def fabric_claim_action(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        resolved: Any = Depends(get_claim_hook),
    ) -> JSONResponse:
        try:
            ctx = await request.json()
        except ValueError as exc:
            raise InvalidContextError(received="malformed JSON") from exc
        body = run_action(hook if hook is not None else resolved, ctx)
        return JSONResponse(content=body)

    return router
