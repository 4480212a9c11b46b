"""Claim-setter hook for identity provider custom actions."""

from fabric_claims.hook._hook import FabricClaimHook, set_fabric_claim

__all__ = ["FabricClaimHook", "set_fabric_claim"]
