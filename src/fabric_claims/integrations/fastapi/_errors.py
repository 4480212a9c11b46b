"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from fabric_claims.exceptions import FabricClaimsError, InvalidContextError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for fabric-claims errors on a FastAPI app.

    - ``InvalidContextError`` -> 400 Bad Request
    - any other ``FabricClaimsError`` -> 500 Internal Server Error

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(InvalidContextError)
    async def invalid_context_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: InvalidContextError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FabricClaimsError)
    async def claims_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: FabricClaimsError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
