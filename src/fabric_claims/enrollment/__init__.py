"""Enrollment request record models.

``build_enrollment_request`` lives in ``fabric_claims.enrollment._builder``
and is re-exported from the top-level package; it depends on the config
module, which itself depends on these models.
"""

from fabric_claims.enrollment._models import AttributeGrant, EnrollmentRequest

__all__ = ["AttributeGrant", "EnrollmentRequest"]
