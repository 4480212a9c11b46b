"""HTTP action target integrations for fabric-claims."""

from fabric_claims.integrations._targets import AppendClaimsApi, run_action

__all__ = ["AppendClaimsApi", "run_action"]
