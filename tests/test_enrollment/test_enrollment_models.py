"""Tests for AttributeGrant and EnrollmentRequest value objects."""

from __future__ import annotations

import dataclasses

import pytest

from fabric_claims.enrollment._models import AttributeGrant, EnrollmentRequest


def _request(*attrs: AttributeGrant) -> EnrollmentRequest:
    return EnrollmentRequest(
        id="replacedWithSubject",
        type="client",
        affiliation="org1.department1",
        attrs=attrs or (AttributeGrant("hf.Registrar.Roles", "client", ecert=True),),
    )


class TestAttributeGrant:
    def test_ecert_defaults_false(self) -> None:
        assert AttributeGrant("a", "b").ecert is False

    def test_to_dict(self) -> None:
        grant = AttributeGrant("hf.Registrar.Roles", "client", ecert=True)
        assert grant.to_dict() == {"name": "hf.Registrar.Roles", "value": "client", "ecert": True}

    def test_frozen(self) -> None:
        grant = AttributeGrant("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            grant.value = "c"  # type: ignore[misc]


class TestEnrollmentRequest:
    def test_requires_at_least_one_grant(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            EnrollmentRequest(id="x", type="client", affiliation="org1", attrs=())

    def test_frozen(self) -> None:
        request = _request()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.id = "alice"  # type: ignore[misc]

    def test_to_dict_shape(self) -> None:
        assert _request().to_dict() == {
            "id": "replacedWithSubject",
            "type": "client",
            "affiliation": "org1.department1",
            "attrs": [{"name": "hf.Registrar.Roles", "value": "client", "ecert": True}],
        }

    def test_to_dict_preserves_grant_order(self) -> None:
        request = _request(AttributeGrant("z", "1"), AttributeGrant("a", "2"), AttributeGrant("m", "3"))
        assert [attr["name"] for attr in request.to_dict()["attrs"]] == ["z", "a", "m"]

    def test_to_dict_returns_new_dict_each_call(self) -> None:
        request = _request()
        first = request.to_dict()
        first["attrs"].clear()
        assert len(request.to_dict()["attrs"]) == 1
