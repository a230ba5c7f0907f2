"""
Length validators - min, max and exact string length.
"""

from typing import Any

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator


class MinLengthValidator(BaseValidator):
    """
    Validates ``len(value) >= min``.

    Parameters:
    - min: Minimum length (inclusive). Missing is itself a failure.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)

        if params.min is None:
            return self.fail(field_name, "Min Lenght validation requires 'min' parameter")

        if len(self.as_text(value)) < params.min:
            return self.fail(field_name, "Too short")
        return True

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.MIN


class MaxLengthValidator(BaseValidator):
    """
    Validates ``len(value) <= max``.

    Parameters:
    - max: Maximum length (inclusive). Missing is itself a failure.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)

        if params.max is None:
            return self.fail(field_name, "Max Lenght validation requires 'max' parameter")

        if len(self.as_text(value)) > params.max:
            return self.fail(field_name, "Too large")
        return True

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.MAX


class ExactLengthValidator(BaseValidator):
    """
    Validates ``len(value) == exact``.

    Parameters:
    - exact: Required length. Missing is itself a failure.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)

        if params.exact is None:
            return self.fail(field_name, "Exact Lenght validation requires 'exact' parameter")

        if len(self.as_text(value)) != params.exact:
            return self.fail(field_name, f"Will be {params.exact} lenght")
        return True

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.EXACT
