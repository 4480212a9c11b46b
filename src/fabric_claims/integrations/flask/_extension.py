"""Flask extension exposing the claim hook as an HTTP action target."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from fabric_claims.exceptions import FabricClaimsError, InvalidContextError
from fabric_claims.hook._hook import FabricClaimHook
from fabric_claims.integrations._targets import run_action

__all__ = ["FabricClaimsExtension"]

DEFAULT_URL_RULE = "/actions/fabric-claim"


class FabricClaimsExtension:
    """Flask extension that serves the ``fabric`` claim action target.

    Registers a POST view that runs the hook against the posted JSON
    context and returns the ``append_claims`` response, plus error
    handlers for fabric-claims exceptions.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        hook: The hook to run. Defaults to a ``FabricClaimHook`` bound to
            the global config.
        url_rule: URL rule for the action target.
        endpoint: Flask endpoint name for the view.

    Example::

        from flask import Flask
        from fabric_claims.integrations.flask import FabricClaimsExtension

        app = Flask(__name__)
        FabricClaimsExtension(app)
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        hook: Callable[[Any, Any], None] | None = None,
        url_rule: str = DEFAULT_URL_RULE,
        endpoint: str = "fabric_claims_action",
    ) -> None:
        self._hook = hook if hook is not None else FabricClaimHook()
        self._url_rule = url_rule
        self._endpoint = endpoint

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores the hook on ``app.extensions["fabric_claims"]`` keyed by
        endpoint, registers the action view and error handlers. Several
        extensions with different endpoints can share one app.

        Example::

            claims = FabricClaimsExtension()
            app = Flask(__name__)
            claims.init_app(app)
        """
        app.extensions.setdefault("fabric_claims", {})[self._endpoint] = {"hook": self._hook}
        app.add_url_rule(
            self._url_rule,
            endpoint=self._endpoint,
            view_func=self._action_view,
            methods=["POST"],
        )

        @app.errorhandler(InvalidContextError)
        def handle_invalid_context(exc: InvalidContextError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 400

        @app.errorhandler(FabricClaimsError)
        def handle_claims_error(exc: FabricClaimsError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 500

    def _action_view(self):
        try:
            ctx = request.get_json(force=True)
        except BadRequest as exc:
            raise InvalidContextError(received="malformed JSON") from exc
        return jsonify(run_action(self._hook, ctx))
