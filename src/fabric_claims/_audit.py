"""Audit logging for claim registrations."""

from __future__ import annotations

import logging

from fabric_claims._types import ClaimValue
from fabric_claims.config._config import EnrollmentConfig

__all__ = ["log_claim_set"]

logger = logging.getLogger("fabric_claims")


def log_claim_set(
    *,
    claim_key: str,
    value: ClaimValue,
    config: EnrollmentConfig,
) -> None:
    """Log that a claim is about to be set on the host context.

    Only emits when ``config.log_claims`` is enabled.

    Logging levels:
    - INFO: Summary (claim key, identity type, affiliation, grant count)
    - DEBUG: Full claim payload

    Example::

        log_claim_set(claim_key="fabric", value=request.to_dict(), config=cfg)
    """
    if not config.log_claims:
        return

    logger.info(
        "Setting claim %r: type=%s affiliation=%s attrs=%d",
        claim_key,
        value.get("type"),
        value.get("affiliation"),
        len(value.get("attrs", [])),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Claim %r payload: %r", claim_key, value)
