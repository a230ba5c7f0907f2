"""
UrlValidator - validates URLs against the engine's allowed protocols.
"""

import re
from typing import Any
from urllib.parse import urlsplit

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator

SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes that carry no authority part
PATH_ONLY_SCHEMES = {"mailto", "news", "file", "urn"}


def is_valid_url(text: str) -> bool:
    """Return True if ``text`` is a syntactically valid absolute URL."""
    if not text or any(ch.isspace() for ch in text):
        return False

    try:
        parts = urlsplit(text)
    except ValueError:
        return False

    if not parts.scheme or not SCHEME_PATTERN.fullmatch(parts.scheme):
        return False

    if parts.scheme.lower() in PATH_ONLY_SCHEMES:
        return bool(parts.netloc or parts.path)

    return bool(parts.hostname)


class UrlValidator(BaseValidator):
    """
    Validates a URL.

    Passes when the value is a valid URL, contains exactly one ``://`` and
    its scheme is in ``config.allowed_url_protocols``.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        text = self.as_text(value)

        if not is_valid_url(text):
            return self.fail(field_name, "Url not valid")

        passed = True
        protocol = text.split("://")

        if len(protocol) != 2:
            passed = self.fail(field_name, "Protocol repeated")

        if protocol[0] not in self.config.allowed_url_protocols:
            passed = self.fail(field_name, "Protocol not allowed")

        return passed

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.URL
