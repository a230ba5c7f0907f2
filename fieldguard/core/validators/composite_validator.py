"""
Composite validators - phone and ZIP codes built from the ``is`` and ``exact`` rules.

Both follow Mexican conventions: 10-digit phone numbers, 5-digit ZIP codes.
"""

import re
from typing import Any

from fieldguard.core.models import ExactParams, IsParams, RuleKind

from .base_validator import BaseValidator
from .length_validator import ExactLengthValidator
from .type_validator import TypeValidator

INTEGER_PARAMS = IsParams(type="int")

# Codes are bare digits: no sign, no whitespace
DIGITS_PATTERN = re.compile(r"[0-9]+")


class DigitCodeValidator(BaseValidator):
    """
    Runs ``is[type=int]`` and ``exact[exact=N]`` on the same value.

    Signed integers pass ``is[int]`` but are not codes, so a leading sign
    is reported as ``Not integer`` too.

    Both delegates always run, so a value that is neither numeric nor the
    right length reports two failures.
    """

    length: int

    def __init__(self, failures, config=None):
        super().__init__(failures, config)
        self._type_check = TypeValidator(failures, self.config)
        self._length_check = ExactLengthValidator(failures, self.config)
        self._length_params = ExactParams(exact=self.length)

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        is_int = self._type_check.validate(field_name, value, INTEGER_PARAMS)
        if is_int and DIGITS_PATTERN.fullmatch(self.as_text(value)) is None:
            is_int = self.fail(field_name, "Not integer")
        has_length = self._length_check.validate(field_name, value, self._length_params)
        return is_int and has_length


class PhoneValidator(DigitCodeValidator):
    """Validates a 10-digit phone or cell number."""

    length = 10

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.PHONE


class ZipValidator(DigitCodeValidator):
    """Validates a 5-digit ZIP code."""

    length = 5

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.ZIP
