"""Exception hierarchy for fabric-claims."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "FabricClaimsError",
    "InvalidContextError",
]


class FabricClaimsError(Exception):
    """Base exception for all fabric-claims errors."""


class ConfigurationError(FabricClaimsError, ValueError):
    """An ``EnrollmentConfig`` option has an invalid value.

    Attributes:
        option: Name of the offending option.
        value: The rejected value.

    Example::

        try:
            EnrollmentConfig(identity_type="robot")
        except ConfigurationError as exc:
            print(f"bad {exc.option}: {exc.value!r}")
    """

    def __init__(
        self,
        *,
        option: str,
        value: object,
        message: str | None = None,
    ) -> None:
        self.option = option
        self.value = value
        if message is None:
            message = f"Invalid value for {option}: {value!r}"
        super().__init__(message)


class InvalidContextError(FabricClaimsError):
    """An HTTP action target received a context that is not a JSON object.

    Raised by the FastAPI and Flask adapters before the hook runs. The hook
    itself never raises this.

    Attributes:
        received: Python type name of the decoded request body.
    """

    def __init__(self, *, received: str) -> None:
        self.received = received
        super().__init__(f"Expected a JSON object as action context, got {received}")
