"""Construction of the enrollment request record from configuration."""

from __future__ import annotations

from fabric_claims.config._config import EnrollmentConfig, get_global_config
from fabric_claims.enrollment._models import AttributeGrant, EnrollmentRequest

__all__ = ["build_enrollment_request"]


def build_enrollment_request(
    config: EnrollmentConfig | None = None,
    *,
    enrollment_id: str | None = None,
) -> EnrollmentRequest:
    """Build a fresh ``EnrollmentRequest`` from *config*.

    The registrar role grant always comes first, followed by
    ``config.extra_attrs`` in their configured order.

    Args:
        config: Enrollment defaults. Defaults to the global config.
        enrollment_id: Explicit ``id`` value. When ``None`` the configured
            ``enrollment_id`` placeholder is used as-is.

    Returns:
        A new, immutable ``EnrollmentRequest``.

    Example::

        request = build_enrollment_request()
        assert request.id == "replacedWithSubject"
        assert request.attrs[0].name == "hf.Registrar.Roles"
    """
    cfg = config if config is not None else get_global_config()
    registrar_grant = AttributeGrant(
        name=cfg.registrar_attr,
        value=cfg.registrar_role,
        ecert=cfg.ecert_visible,
    )
    return EnrollmentRequest(
        id=enrollment_id if enrollment_id is not None else cfg.enrollment_id,
        type=cfg.identity_type,
        affiliation=cfg.affiliation,
        attrs=(registrar_grant, *cfg.extra_attrs),
    )
