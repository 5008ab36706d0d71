"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from shadow_tx.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DomainError,
    NoFactoryRegisteredError,
    UnauthorizedError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestNoFactoryRegisteredError:
    def test_is_configuration_error(self) -> None:
        err = NoFactoryRegisteredError("PING")
        assert isinstance(err, ConfigurationError)
        assert isinstance(err, ApplicationError)

    def test_carries_event_type(self) -> None:
        err = NoFactoryRegisteredError("PING")
        assert err.event_type == "PING"
        assert err.code == "no_factory_registered"
        assert err.detail == {"event_type": "PING"}
        assert "PING" in err.message


class TestUnauthorizedError:
    def test_default_message_names_source(self) -> None:
        err = UnauthorizedError(source="kiosk", event_type="REFUND")
        assert err.message == "Unauthorized source: kiosk"
        assert err.source == "kiosk"
        assert err.event_type == "REFUND"
        assert err.code == "unauthorized"

    def test_custom_message(self) -> None:
        assert UnauthorizedError("nope").message == "nope"


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert isinstance(ValidationError("bad"), DomainError)

    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_to_dict_includes_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "sku", "msg": "required"}])
        assert err.to_dict()["errors"] == [{"field": "sku", "msg": "required"}]

    def test_can_be_raised_and_caught_as_base(self) -> None:
        with pytest.raises(BaseError):
            raise ValidationError("bad")
