"""
Base validator interface for all rule kinds.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from typing import Any

from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.models import FailureLog, RuleKind, RuleParams, decode_params


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one rule kind. Violations are appended to the
    shared failure log rather than raised, so a single call may record zero,
    one or several failures before returning False.
    """

    def __init__(self, failures: FailureLog, config: EngineConfig | None = None):
        """
        Initialize validator.

        Args:
            failures: Log that collects (field, message) records
            config: Engine settings (URL protocols, date format, MX timeout)
        """
        self.failures = failures
        self.config = config or EngineConfig()

    @abstractmethod
    def validate(self, field_name: str, value: Any, params: RuleParams | dict[str, Any] | None = None) -> bool:
        """
        Validate a value against this rule.

        Args:
            field_name: Field being validated (attributed on failures)
            value: Candidate value
            params: Typed parameters, or a raw dict decoded on the fly

        Returns:
            True if the value passed, False if any failure was recorded
        """
        pass

    @property
    @abstractmethod
    def rule_kind(self) -> RuleKind:
        """Return the rule kind this validator implements."""
        pass

    def fail(self, field_name: str, message: str) -> bool:
        """Record a failure and return False."""
        self.failures.add(field_name, message)
        return False

    def resolve_params(self, field_name: str, params: RuleParams | dict[str, Any] | None) -> RuleParams:
        return decode_params(self.rule_kind, field_name, params)

    @staticmethod
    def as_text(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.rule_kind.value})"
