"""Shared protocols and type aliases for fabric-claims."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

__all__ = [
    "ClaimSetter",
    "ClaimValue",
    "HookApi",
    "IdentityType",
]

# Identity classes understood by Fabric CA.
IdentityType = Literal["client", "peer", "orderer", "admin", "user"]

# A JSON-serializable claim value.
ClaimValue = dict[str, Any]


@runtime_checkable
class ClaimSetter(Protocol):
    """Structural type for the host capability that sets named claims.

    Example::

        class Claims:
            def set_claim(self, key: str, value: object) -> None:
                token_claims[key] = value

        assert isinstance(Claims(), ClaimSetter)
    """

    def set_claim(self, key: str, value: Any) -> None: ...


@runtime_checkable
class HookApi(Protocol):
    """Structural type for the API object handed to a hook by the host.

    Any object with a ``claims`` attribute satisfying ``ClaimSetter``
    works — no inheritance required.
    """

    @property
    def claims(self) -> ClaimSetter: ...
