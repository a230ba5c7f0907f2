"""
RequiredFieldValidator - ensures a value is present and not empty.
"""

from typing import Any

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator

REQUIRED_MESSAGE = "Required and not empty"


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a value is present.

    Fails if the value is None or the empty string. During a run the engine's
    presence gate handles this before dispatch; the validator covers direct calls.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        if value is None or value == "":
            return self.fail(field_name, REQUIRED_MESSAGE)
        return True

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.REQUIRED
