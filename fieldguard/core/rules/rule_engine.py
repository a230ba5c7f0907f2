"""
Rule engine for validating named field values.

The engine keeps a registration store of (field, rule kind) -> (value, params),
walks it once per run, and collects every violation instead of stopping at
the first one.
"""

import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.exceptions import CatalogError, NoValidationsError, UnknownRuleKindError
from fieldguard.core.models import (
    Failure,
    FailureLog,
    Registration,
    RuleKind,
    RuleParams,
    ValidationResult,
    decode_params,
)
from fieldguard.core.rules.grammar import parse_rule_string
from fieldguard.core.validators import (
    BaseValidator,
    DateValidator,
    EmailValidator,
    ExactLengthValidator,
    IpValidator,
    MaxLengthValidator,
    MinLengthValidator,
    PhoneValidator,
    RequiredFieldValidator,
    TypeValidator,
    UrlValidator,
    ZipValidator,
)
from fieldguard.core.validators.required_field_validator import REQUIRED_MESSAGE
from fieldguard.observability import metrics

logger = logging.getLogger(__name__)


class Validator:
    """
    Validates a set of named field values against registered rules.

    Usage:
        validator = Validator()
        validator.parse([
            ("name", form["name"], "required|min[3]|max[40]"),
            ("email", form["email"], "required|email[no_hostname_check]"),
            ("zip", form["zip"], "zip"),
        ])
        if not validator.run():
            for failure in validator.get_failures():
                print(failure.field, failure.message)
    """

    VALIDATOR_REGISTRY: dict[RuleKind, type[BaseValidator]] = {
        RuleKind.REQUIRED: RequiredFieldValidator,
        RuleKind.EMAIL: EmailValidator,
        RuleKind.MIN: MinLengthValidator,
        RuleKind.MAX: MaxLengthValidator,
        RuleKind.EXACT: ExactLengthValidator,
        RuleKind.IS: TypeValidator,
        RuleKind.IP: IpValidator,
        RuleKind.URL: UrlValidator,
        RuleKind.PHONE: PhoneValidator,
        RuleKind.ZIP: ZipValidator,
        RuleKind.DATE: DateValidator,
    }

    def __init__(self, config: EngineConfig | None = None):
        """
        Initialize the engine and bind every rule kind to its validator.

        Args:
            config: Engine settings; a fresh default EngineConfig if omitted

        Raises:
            CatalogError: If a rule kind has no validator in VALIDATOR_REGISTRY
        """
        self.config = config.model_copy(deep=True) if config else EngineConfig()
        self.failures = FailureLog()
        self.registrations: dict[str, dict[RuleKind, Registration]] = {}
        self.validators: dict[RuleKind, BaseValidator] = {}
        self._build_validators()

    def _build_validators(self) -> None:
        """Instantiate one validator per rule kind, failing fast on gaps."""
        for rule_kind in RuleKind:
            validator_class = self.VALIDATOR_REGISTRY.get(rule_kind)
            if validator_class is None:
                logger.error(f"No validator bound to rule kind '{rule_kind.value}'")
                raise CatalogError(f"Can't find '{rule_kind.value}' validation type")
            self.validators[rule_kind] = validator_class(self.failures, self.config)

    @classmethod
    def from_rules(
        cls,
        rules: Mapping[str, str],
        values: Mapping[str, Any],
        config: EngineConfig | None = None,
    ) -> "Validator":
        """
        Build an engine from a field -> rule string mapping.

        Args:
            rules: Field name to rule string (``"required|min[3]"``)
            values: Field name to candidate value; missing fields are None
            config: Optional engine settings

        Returns:
            A Validator with every rule registered, ready to run()
        """
        validator = cls(config)
        validator.parse((field, values.get(field), rule_string) for field, rule_string in rules.items())
        return validator

    # Registration store

    def register(
        self,
        field_name: str,
        rule_kind: RuleKind | str,
        value: Any,
        params: RuleParams | dict[str, Any] | None = None,
    ) -> Registration:
        """
        Register a rule for a field, replacing any earlier one of the same kind.

        Args:
            field_name: Field to validate
            rule_kind: Rule kind (enum member or its name)
            value: Candidate value
            params: Raw or typed parameters for the kind

        Returns:
            The stored Registration

        Raises:
            UnknownRuleKindError: If ``rule_kind`` is not in the catalog
            InvalidParameterError: If ``params`` cannot be decoded for the kind
        """
        kind = rule_kind if isinstance(rule_kind, RuleKind) else RuleKind.lookup(rule_kind)
        if kind is None:
            logger.error(f"Unknown rule kind '{rule_kind}' for field '{field_name}'")
            raise UnknownRuleKindError(str(rule_kind))

        registration = Registration(
            field_name=field_name,
            rule_kind=kind,
            value=value,
            params=decode_params(kind, field_name, params),
        )
        self.registrations.setdefault(field_name, {})[kind] = registration

        metrics.record_registration(kind.value)
        logger.debug(f"Registered '{kind.value}' for field '{field_name}'")
        return registration

    def parse(self, items: Iterable[tuple[str, Any, str]]) -> None:
        """
        Register rules from (field, value, rule string) triples.

        Field names, rule kinds and string values are trimmed.

        Raises:
            UnknownRuleKindError: On the first spec whose kind is not in the catalog
        """
        for field_name, value, rule_string in items:
            field_name = field_name.strip()
            if isinstance(value, str):
                value = value.strip()

            for rule in parse_rule_string(rule_string):
                self.register(field_name, rule.kind, value, rule.params)

    def set_allowed_url_protocols(self, protocols: Iterable[str] | str) -> None:
        """Replace the schemes accepted by the ``url`` rule (a single name is accepted)."""
        self.config.allowed_url_protocols = protocols

    def add_allowed_url_protocol(self, protocol: str) -> None:
        """Accept one more scheme in the ``url`` rule."""
        self.config.allowed_url_protocols.add(protocol.strip())

    @staticmethod
    def list_validations() -> list[str]:
        """Return the names of every rule kind, in catalog order."""
        return RuleKind.names()

    def get_failures(self) -> list[Failure]:
        """Return a snapshot of the failures collected so far."""
        return self.failures.snapshot()

    # Evaluation

    def run(self) -> bool:
        """
        Evaluate every registration.

        Returns:
            True if no failures were collected, False otherwise

        Raises:
            NoValidationsError: If nothing was registered
        """
        if not self.registrations:
            logger.error("run() called with no registrations")
            raise NoValidationsError()

        start_time = time.perf_counter()
        before = len(self.failures)

        for field_name, rules in self.registrations.items():
            self._validate_field(field_name, rules)

        passed = len(self.failures) == 0
        new_failures = len(self.failures) - before
        duration = time.perf_counter() - start_time

        metrics.record_evaluation(passed, new_failures, duration)
        logger.info(
            f"Validation {'passed' if passed else 'failed'}",
            extra={
                "fields_checked": len(self.registrations),
                "failure_count": new_failures,
                "duration_seconds": round(duration, 6),
            },
        )
        return passed

    def _validate_field(self, field_name: str, rules: dict[RuleKind, Registration]) -> None:
        """Apply the presence gate, then each rule kind in registration order."""
        required = rules.get(RuleKind.REQUIRED)

        # Required is gated first whatever its registration position
        if required is not None and required.is_empty:
            self.failures.add(field_name, REQUIRED_MESSAGE)
            return

        for rule_kind, registration in rules.items():
            if rule_kind is RuleKind.REQUIRED:
                continue

            if registration.is_empty:
                if required is not None:
                    self.failures.add(field_name, REQUIRED_MESSAGE)
                return

            self.validators[rule_kind].validate(field_name, registration.value, registration.params)

    def result(self) -> ValidationResult:
        """Package the current failure list as a ValidationResult."""
        failures = self.get_failures()
        return ValidationResult(
            passed=not failures,
            failures=failures,
            fields_checked=len(self.registrations),
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of registered rules.

        Returns:
            Dictionary with field and rule counts
        """
        return {
            "total_fields": len(self.registrations),
            "total_rules": sum(len(rules) for rules in self.registrations.values()),
            "rules_by_kind": self._count_by_kind(),
        }

    def _count_by_kind(self) -> dict[str, int]:
        """Count registrations by rule kind."""
        counts: dict[str, int] = {}
        for rules in self.registrations.values():
            for rule_kind in rules:
                counts[rule_kind.value] = counts.get(rule_kind.value, 0) + 1
        return counts
