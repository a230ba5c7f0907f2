"""
DateValidator - validates calendar dates against a PHP-style format string.
"""

from datetime import datetime
from typing import Any

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator

# PHP date format token -> strptime directive
FORMAT_TOKENS = {
    "d": "%d",
    "j": "%d",
    "m": "%m",
    "n": "%m",
    "Y": "%Y",
    "y": "%y",
    "H": "%H",
    "G": "%H",
    "i": "%M",
    "s": "%S",
    "M": "%b",
    "F": "%B",
    "D": "%a",
    "l": "%A",
}


# A format must name all three parts of a calendar date
DAY_TOKENS = {"d", "j"}
MONTH_TOKENS = {"m", "n", "M", "F"}
YEAR_TOKENS = {"Y", "y"}


def _scan(php_format: str):
    """Yield (char, is_token) pairs; a backslash escapes the next character."""
    chars = iter(php_format)
    for ch in chars:
        if ch == "\\":
            yield next(chars, ""), False
        else:
            yield ch, ch in FORMAT_TOKENS


def to_strptime_format(php_format: str) -> str:
    """
    Translate a PHP-style date format (``d/m/Y``) into a strptime format.

    Unknown characters are literals; a backslash escapes the next character.
    """
    out = []
    for ch, is_token in _scan(php_format):
        out.append(FORMAT_TOKENS[ch] if is_token else ch.replace("%", "%%"))
    return "".join(out)


def has_date_parts(php_format: str) -> bool:
    """Return True if the format carries a day, a month and a year token."""
    tokens = {ch for ch, is_token in _scan(php_format) if is_token}
    return all(tokens & group for group in (DAY_TOKENS, MONTH_TOKENS, YEAR_TOKENS))


class DateValidator(BaseValidator):
    """
    Validates that a value is a real calendar date.

    Parameters:
    - format: PHP-style format (default: the engine's ``default_date_format``, ``d/m/Y``)
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)
        php_format = params.format or self.config.default_date_format

        if not has_date_parts(php_format):
            return self.fail(field_name, "Date not valid")

        try:
            datetime.strptime(self.as_text(value), to_strptime_format(php_format))
        except ValueError:
            return self.fail(field_name, "Date not valid")
        return True

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.DATE
