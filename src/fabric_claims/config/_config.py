"""Layered configuration for fabric-claims."""

from __future__ import annotations

from dataclasses import dataclass

from fabric_claims._types import IdentityType
from fabric_claims.enrollment._models import AttributeGrant
from fabric_claims.exceptions import ConfigurationError

__all__ = [
    "EnrollmentConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_IDENTITY_TYPES: set[str] = {"client", "peer", "orderer", "admin", "user"}


@dataclass(frozen=True, slots=True)
class EnrollmentConfig:
    """Enrollment defaults used to build the ``fabric`` claim.

    Attributes:
        claim_key: Name of the claim the enrollment request is set under.
        enrollment_id: Value of the ``id`` field. The default is a literal
            placeholder; it is never replaced with the subject unless a
            ``subject_resolver`` is given to the hook.
        identity_type: Fabric CA identity class.
        affiliation: Dotted organizational path (``"org1.department1"``).
        registrar_attr: Name of the registrar role attribute.
        registrar_role: Value granted for ``registrar_attr``.
        ecert_visible: Whether the registrar attribute is embedded in the
            enrollment certificate.
        extra_attrs: Additional grants appended after the registrar grant.
        log_claims: Emit audit log lines for each claim set.

    Example::

        config = EnrollmentConfig(affiliation="org2.department1")
        merged = config.merge(ecert_visible=False)
    """

    claim_key: str = "fabric"
    enrollment_id: str = "replacedWithSubject"
    identity_type: IdentityType = "client"
    affiliation: str = "org1.department1"
    registrar_attr: str = "hf.Registrar.Roles"
    registrar_role: str = "client"
    ecert_visible: bool = True
    extra_attrs: tuple[AttributeGrant, ...] = ()
    log_claims: bool = False

    def __post_init__(self) -> None:
        for option in ("claim_key", "affiliation", "registrar_attr"):
            value = getattr(self, option)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    option=option,
                    value=value,
                    message=f"{option} must be a non-empty string, got {value!r}",
                )
        if not isinstance(self.enrollment_id, str):
            raise ConfigurationError(option="enrollment_id", value=self.enrollment_id)
        if not isinstance(self.registrar_role, str):
            raise ConfigurationError(option="registrar_role", value=self.registrar_role)
        if self.identity_type not in _VALID_IDENTITY_TYPES:
            raise ConfigurationError(
                option="identity_type",
                value=self.identity_type,
                message=(
                    f"identity_type must be one of {sorted(_VALID_IDENTITY_TYPES)!r}, "
                    f"got {self.identity_type!r}"
                ),
            )
        if not isinstance(self.ecert_visible, bool):
            raise ConfigurationError(option="ecert_visible", value=self.ecert_visible)
        if not isinstance(self.log_claims, bool):
            raise ConfigurationError(option="log_claims", value=self.log_claims)
        if not isinstance(self.extra_attrs, tuple):
            # Stored as a tuple; lists are converted.
            if isinstance(self.extra_attrs, list):
                object.__setattr__(self, "extra_attrs", tuple(self.extra_attrs))
            else:
                raise ConfigurationError(option="extra_attrs", value=self.extra_attrs)
        for grant in self.extra_attrs:
            if not isinstance(grant, AttributeGrant):
                raise ConfigurationError(
                    option="extra_attrs",
                    value=grant,
                    message=f"extra_attrs entries must be AttributeGrant, got {grant!r}",
                )

    def merge(
        self,
        *,
        claim_key: str | None = None,
        enrollment_id: str | None = None,
        identity_type: IdentityType | None = None,
        affiliation: str | None = None,
        registrar_attr: str | None = None,
        registrar_role: str | None = None,
        ecert_visible: bool | None = None,
        extra_attrs: tuple[AttributeGrant, ...] | None = None,
        log_claims: bool | None = None,
    ) -> EnrollmentConfig:
        """Return a new config with non-None overrides applied.

        Returns:
            A new ``EnrollmentConfig`` with overrides merged.

        Example::

            base = EnrollmentConfig()
            org2 = base.merge(affiliation="org2.department1")
        """
        return EnrollmentConfig(
            claim_key=claim_key if claim_key is not None else self.claim_key,
            enrollment_id=enrollment_id if enrollment_id is not None else self.enrollment_id,
            identity_type=identity_type if identity_type is not None else self.identity_type,
            affiliation=affiliation if affiliation is not None else self.affiliation,
            registrar_attr=(
                registrar_attr if registrar_attr is not None else self.registrar_attr
            ),
            registrar_role=(
                registrar_role if registrar_role is not None else self.registrar_role
            ),
            ecert_visible=ecert_visible if ecert_visible is not None else self.ecert_visible,
            extra_attrs=extra_attrs if extra_attrs is not None else self.extra_attrs,
            log_claims=log_claims if log_claims is not None else self.log_claims,
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = EnrollmentConfig()


def get_global_config() -> EnrollmentConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.claim_key)  # "fabric"
    """
    return _global_config


def configure(
    *,
    claim_key: str | None = None,
    enrollment_id: str | None = None,
    identity_type: IdentityType | None = None,
    affiliation: str | None = None,
    registrar_attr: str | None = None,
    registrar_role: str | None = None,
    ecert_visible: bool | None = None,
    extra_attrs: tuple[AttributeGrant, ...] | None = None,
    log_claims: bool | None = None,
) -> EnrollmentConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(affiliation="org2.department1", log_claims=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        claim_key=claim_key,
        enrollment_id=enrollment_id,
        identity_type=identity_type,
        affiliation=affiliation,
        registrar_attr=registrar_attr,
        registrar_role=registrar_role,
        ecert_visible=ecert_visible,
        extra_attrs=extra_attrs,
        log_claims=log_claims,
    )
    return _global_config


def _set_global_config(cfg: EnrollmentConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = EnrollmentConfig()
