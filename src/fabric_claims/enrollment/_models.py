"""Value objects for the Fabric CA enrollment request claim."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["AttributeGrant", "EnrollmentRequest"]


@dataclass(frozen=True, slots=True)
class AttributeGrant:
    """A single attribute requested for the enrolled identity.

    Attributes:
        name: Attribute name (e.g. ``"hf.Registrar.Roles"``).
        value: Attribute value.
        ecert: Whether the attribute is embedded in the enrollment certificate.
    """

    name: str
    value: str
    ecert: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {"name": self.name, "value": self.value, "ecert": self.ecert}


@dataclass(frozen=True, slots=True)
class EnrollmentRequest:
    """Enrollment request payload carried in the ``fabric`` claim.

    Attributes:
        id: Identity marker. Left as a placeholder unless a subject is
            explicitly substituted.
        type: Identity class (``"client"``, ``"peer"``, ...).
        affiliation: Dotted organizational path.
        attrs: Ordered, non-empty attribute grants.

    Example::

        request = EnrollmentRequest(
            id="replacedWithSubject",
            type="client",
            affiliation="org1.department1",
            attrs=(AttributeGrant("hf.Registrar.Roles", "client", ecert=True),),
        )
        request.to_dict()["attrs"][0]["name"]  # "hf.Registrar.Roles"
    """

    id: str
    type: str
    affiliation: str
    attrs: tuple[AttributeGrant, ...]

    def __post_init__(self) -> None:
        if not self.attrs:
            raise ValueError("EnrollmentRequest.attrs must contain at least one grant")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary.

        Key order matches the wire format: ``id``, ``type``,
        ``affiliation``, ``attrs``.
        """
        return {
            "id": self.id,
            "type": self.type,
            "affiliation": self.affiliation,
            "attrs": [grant.to_dict() for grant in self.attrs],
        }
