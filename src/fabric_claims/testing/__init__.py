"""fabric-claims testing utilities — recording API, contexts, assertions, fixtures.

- **RecordingClaimsApi / ClaimCall**: host API stub recording ``set_claim``.
- **MockContext / make_context**: lightweight invocation contexts.
- **Assertion helpers**: ``assert_claim_set``, ``assert_no_claims``.
- **Fixtures**: ``claims_api``, ``enrollment_config``, ``isolated_config_state``.

Example::

    from fabric_claims import set_fabric_claim
    from fabric_claims.testing import RecordingClaimsApi, assert_claim_set, make_context

    def test_sets_fabric_claim():
        api = RecordingClaimsApi()
        set_fabric_claim(make_context("alice"), api)
        assert assert_claim_set(api, "fabric")["type"] == "client"
"""

from fabric_claims.testing._api import ClaimCall, RecordingClaimsApi
from fabric_claims.testing._assertions import assert_claim_set, assert_no_claims
from fabric_claims.testing._contexts import MockContext, make_context
from fabric_claims.testing._fixtures import (
    claims_api,
    enrollment_config,
    isolated_config_state,
)
from fabric_claims.testing._isolation import isolated_config

__all__ = [
    "ClaimCall",
    "MockContext",
    "RecordingClaimsApi",
    "assert_claim_set",
    "assert_no_claims",
    "claims_api",
    "enrollment_config",
    "isolated_config",
    "isolated_config_state",
    "make_context",
]
