"""Claim-setter hook — attaches the enrollment request to the auth context."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fabric_claims._audit import log_claim_set
from fabric_claims._types import HookApi
from fabric_claims.config._config import EnrollmentConfig, get_global_config
from fabric_claims.enrollment._builder import build_enrollment_request

__all__ = ["FabricClaimHook", "set_fabric_claim"]

_DEFAULT_CONFIG = EnrollmentConfig()


def set_fabric_claim(
    ctx: Any,
    api: HookApi,
    *,
    config: EnrollmentConfig | None = None,
) -> None:
    """Set the enrollment request claim through the host API.

    Builds a fresh enrollment request and calls
    ``api.claims.set_claim(config.claim_key, value)`` exactly once. The
    context is accepted for signature compatibility with the host and is
    not read; ``id`` stays the configured placeholder.

    Nothing is validated or caught here: whatever the host's
    ``set_claim`` raises propagates to the host.

    Args:
        ctx: The host invocation context. Unused.
        api: The host API object exposing ``claims.set_claim``.
        config: Enrollment defaults. Defaults to the built-in defaults;
            the global config set by ``configure()`` is not consulted, so
            the claim key stays ``"fabric"`` unless a config is passed.

    Example::

        def action(ctx, api):
            set_fabric_claim(ctx, api)
    """
    _set_claim(api, config if config is not None else _DEFAULT_CONFIG)


def _set_claim(
    api: HookApi,
    config: EnrollmentConfig,
    *,
    enrollment_id: str | None = None,
) -> None:
    value = build_enrollment_request(config, enrollment_id=enrollment_id).to_dict()
    log_claim_set(claim_key=config.claim_key, value=value, config=config)
    api.claims.set_claim(config.claim_key, value)


class FabricClaimHook:
    """Callable hook with enrollment defaults supplied at initialization.

    Instances are stateless between calls and can be shared across
    requests and threads.

    Args:
        config: Enrollment defaults. When ``None`` the global config is
            read on every call, so later ``configure()`` calls apply.
        subject_resolver: Optional ``(ctx) -> str`` returning the subject
            to use as the enrollment ``id``. Without it the ``id`` is the
            configured placeholder and the context is never read.

    Example::

        hook = FabricClaimHook(EnrollmentConfig(affiliation="org2.department1"))
        hook(ctx, api)

        # Opt in to subject substitution:
        hook = FabricClaimHook(subject_resolver=lambda ctx: ctx["subject"])
    """

    def __init__(
        self,
        config: EnrollmentConfig | None = None,
        *,
        subject_resolver: Callable[[Any], str] | None = None,
    ) -> None:
        self._config = config
        self._subject_resolver = subject_resolver

    @property
    def config(self) -> EnrollmentConfig:
        """The effective config for the next invocation."""
        return self._config if self._config is not None else get_global_config()

    def __call__(self, ctx: Any, api: HookApi) -> None:
        enrollment_id = None
        if self._subject_resolver is not None:
            enrollment_id = self._subject_resolver(ctx)
        _set_claim(api, self.config, enrollment_id=enrollment_id)

    def __repr__(self) -> str:
        return f"FabricClaimHook(config={self._config!r})"
