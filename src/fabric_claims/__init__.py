"""fabric-claims — Hyperledger Fabric CA enrollment claim for identity provider actions.

Attaches an enrollment request payload to an authentication context as
the ``fabric`` claim. No CA calls, no network round-trips.

Example::

    from fabric_claims import set_fabric_claim

    def action(ctx, api):
        set_fabric_claim(ctx, api)
        # api.claims.set_claim("fabric", {"id": "replacedWithSubject", ...})
"""

from importlib.metadata import PackageNotFoundError, version

from fabric_claims._types import ClaimSetter, HookApi
from fabric_claims.config._config import EnrollmentConfig, configure
from fabric_claims.config._settings import config_from_env
from fabric_claims.enrollment._builder import build_enrollment_request
from fabric_claims.enrollment._models import AttributeGrant, EnrollmentRequest
from fabric_claims.exceptions import (
    ConfigurationError,
    FabricClaimsError,
    InvalidContextError,
)
from fabric_claims.hook._hook import FabricClaimHook, set_fabric_claim

try:
    __version__ = version("fabric-claims")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AttributeGrant",
    "ClaimSetter",
    "ConfigurationError",
    "EnrollmentConfig",
    "EnrollmentRequest",
    "FabricClaimHook",
    "FabricClaimsError",
    "HookApi",
    "InvalidContextError",
    "build_enrollment_request",
    "config_from_env",
    "configure",
    "set_fabric_claim",
]
