"""
Unit tests for the data models.
"""

import pytest
from pydantic import ValidationError

from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.exceptions import InvalidParameterError
from fieldguard.core.models import (
    PARAMS_BY_KIND,
    DateParams,
    EmailParams,
    Failure,
    FailureLog,
    IpParams,
    IsParams,
    MinParams,
    Registration,
    RuleKind,
    ValidationResult,
    decode_params,
)


class TestRuleKind:
    """Tests for the RuleKind enumeration"""

    def test_catalog_is_closed(self):
        assert len(RuleKind) == 11
        assert set(PARAMS_BY_KIND) == set(RuleKind)

    def test_lookup(self):
        assert RuleKind.lookup("zip") is RuleKind.ZIP
        assert RuleKind.lookup("ZIP") is None
        assert RuleKind.lookup("") is None

    def test_str(self):
        assert str(RuleKind.IS) == "is"


class TestDecodeParams:
    """Tests for typed parameter decoding"""

    def test_positional_bound_is_converted(self):
        assert decode_params(RuleKind.MIN, "name", {"min": "5"}) == MinParams(min=5)

    def test_missing_bound_stays_none(self):
        assert decode_params(RuleKind.MIN, "name", {}).min is None

    def test_unknown_keys_are_ignored(self):
        assert decode_params(RuleKind.MIN, "name", {"min": "1", "foo": True}) == MinParams(min=1)

    def test_invalid_bound_raises(self):
        with pytest.raises(InvalidParameterError, match=r"\[max\] title"):
            decode_params(RuleKind.MAX, "title", {"max": "lots"})

    @pytest.mark.parametrize("raw, expected", [(True, True), ("yes", True), ("1", True), ("0", False), ("false", False)])
    def test_flags(self, raw, expected):
        assert decode_params(RuleKind.IP, "ip", {"v4": raw}).v4 is expected

    def test_ip_any_flag(self):
        assert IpParams().any_flag is False
        assert IpParams(reject_private=True).any_flag is True

    def test_email_flag(self):
        assert decode_params(RuleKind.EMAIL, "email", {"no_hostname_check": True}) == EmailParams(no_hostname_check=True)

    def test_is_type_is_trimmed(self):
        assert decode_params(RuleKind.IS, "x", {"type": " int "}) == IsParams(type="int")

    def test_typed_params_pass_through(self):
        params = DateParams(format="Y-m-d")
        assert decode_params(RuleKind.DATE, "born", params) is params

    def test_wrong_typed_params_raise(self):
        with pytest.raises(InvalidParameterError):
            decode_params(RuleKind.DATE, "born", MinParams(min=1))

    def test_params_are_frozen(self):
        params = MinParams(min=1)
        with pytest.raises(ValidationError):
            params.min = 2


class TestRegistration:
    """Tests for the Registration model"""

    @pytest.mark.parametrize("value, empty", [(None, True), ("", True), (" ", False), ("0", False), (False, False)])
    def test_is_empty(self, value, empty):
        registration = Registration(
            field_name="f", rule_kind=RuleKind.REQUIRED, value=value, params=decode_params(RuleKind.REQUIRED, "f", None)
        )
        assert registration.is_empty is empty


class TestFailureLog:
    """Tests for the append-only failure log"""

    def test_preserves_order(self):
        log = FailureLog()
        log.add("b", "second")
        log.add("a", "first")

        assert [f.field for f in log] == ["b", "a"]
        assert len(log) == 2

    def test_snapshot_is_independent(self):
        log = FailureLog()
        log.add("a", "msg")
        snapshot = log.snapshot()
        log.add("b", "msg")

        assert len(snapshot) == 1

    def test_for_field(self):
        log = FailureLog()
        log.add("zip", "Not integer")
        log.add("name", "Too short")
        log.add("zip", "Will be 5 lenght")

        assert [f.message for f in log.for_field("zip")] == ["Not integer", "Will be 5 lenght"]

    def test_failure_requires_message(self):
        with pytest.raises(ValidationError):
            Failure(field="x", message="")


class TestValidationResult:
    """Tests for ValidationResult"""

    def test_passed_with_failures_is_rejected(self):
        with pytest.raises(ValidationError, match="passed=True but failures is not empty"):
            ValidationResult(passed=True, failures=[Failure(field="a", message="b")])

    def test_errors_by_field(self):
        result = ValidationResult(
            passed=False,
            failures=[
                Failure(field="zip", message="Not integer"),
                Failure(field="name", message="Too short"),
                Failure(field="zip", message="Will be 5 lenght"),
            ],
        )
        assert result.errors_by_field() == {
            "zip": ["Not integer", "Will be 5 lenght"],
            "name": ["Too short"],
        }

    def test_json_round_trip(self):
        result = ValidationResult(passed=False, failures=[Failure(field="a", message="b")], fields_checked=1)
        assert ValidationResult.model_validate_json(result.model_dump_json()) == result


class TestEngineConfig:
    """Tests for EngineConfig"""

    def test_defaults(self):
        config = EngineConfig()
        assert config.allowed_url_protocols == {"http", "https"}
        assert config.default_date_format == "d/m/Y"
        assert config.mx_lookup_timeout is None

    def test_protocols_are_normalized(self):
        assert EngineConfig(allowed_url_protocols=[" ftp ", "", "http"]).allowed_url_protocols == {"ftp", "http"}
        assert EngineConfig(allowed_url_protocols="ftp").allowed_url_protocols == {"ftp"}

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            EngineConfig(mx_lookup_timeout=0)
