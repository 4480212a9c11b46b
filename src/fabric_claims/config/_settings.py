"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictBool, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from fabric_claims._types import IdentityType
from fabric_claims.config._config import EnrollmentConfig
from fabric_claims.enrollment._models import AttributeGrant
from fabric_claims.exceptions import ConfigurationError

__all__ = ["DEFAULT_ENV_PREFIX", "EnrollmentSettings", "config_from_env"]

DEFAULT_ENV_PREFIX = "FABRIC_CLAIMS_"


class AttributeGrantSettings(BaseModel):
    """One entry of the ``EXTRA_ATTRS`` JSON list."""

    name: str
    value: str
    ecert: StrictBool = False


class EnrollmentSettings(BaseSettings):
    """Enrollment options read from ``FABRIC_CLAIMS_*`` environment variables.

    Every field is optional; unset variables leave the base config alone.
    ``FABRIC_CLAIMS_EXTRA_ATTRS`` is a JSON list of
    ``{"name", "value", "ecert"}`` objects.
    """

    model_config = SettingsConfigDict(env_prefix=DEFAULT_ENV_PREFIX, extra="ignore")

    claim_key: Optional[str] = Field(default=None, description="Claim name")
    enrollment_id: Optional[str] = Field(default=None, description="Value of the id field")
    identity_type: Optional[IdentityType] = Field(
        default=None, description="Fabric CA identity class"
    )
    affiliation: Optional[str] = Field(default=None, description="Dotted organizational path")
    registrar_attr: Optional[str] = Field(default=None, description="Registrar attribute name")
    registrar_role: Optional[str] = Field(default=None, description="Registrar attribute value")
    ecert_visible: Optional[bool] = Field(default=None, description="Embed registrar attr in ecert")
    extra_attrs: Optional[list[AttributeGrantSettings]] = Field(
        default=None, description="Additional attribute grants (JSON list)"
    )
    log_claims: Optional[bool] = Field(default=None, description="Enable claim audit logging")

    def to_config(self, base: EnrollmentConfig | None = None) -> EnrollmentConfig:
        """Layer the values that were set over *base* (defaults when omitted)."""
        target = base if base is not None else EnrollmentConfig()
        extra = None
        if self.extra_attrs is not None:
            extra = tuple(
                AttributeGrant(name=item.name, value=item.value, ecert=item.ecert)
                for item in self.extra_attrs
            )
        return target.merge(
            claim_key=self.claim_key,
            enrollment_id=self.enrollment_id,
            identity_type=self.identity_type,
            affiliation=self.affiliation,
            registrar_attr=self.registrar_attr,
            registrar_role=self.registrar_role,
            ecert_visible=self.ecert_visible,
            extra_attrs=extra,
            log_claims=self.log_claims,
        )


def config_from_env(
    *,
    prefix: str = DEFAULT_ENV_PREFIX,
    base: EnrollmentConfig | None = None,
) -> EnrollmentConfig:
    """Build a config from environment variables layered over *base*.

    Args:
        prefix: Variable name prefix.
        base: Config to layer the environment over.

    Raises:
        ConfigurationError: If a variable holds an invalid value.

    Example::

        # FABRIC_CLAIMS_AFFILIATION=org2.department1
        config = config_from_env()
        assert config.affiliation == "org2.department1"
    """
    try:
        settings = EnrollmentSettings(_env_prefix=prefix)  # type: ignore[call-arg]
    except ValidationError as exc:
        error = exc.errors()[0]
        option = str(error["loc"][0]) if error["loc"] else "environment"
        raise ConfigurationError(
            option=option,
            value=error.get("input"),
            message=f"{option}: {error['msg']}",
        ) from exc
    except SettingsError as exc:
        raise ConfigurationError(option="environment", value=None, message=str(exc)) from exc
    return settings.to_config(base)
