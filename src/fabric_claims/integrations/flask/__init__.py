"""Flask integration for fabric-claims."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install fabric-claims[flask]"
    ) from exc

from fabric_claims.integrations.flask._extension import FabricClaimsExtension

__all__ = ["FabricClaimsExtension"]
