"""
EmailValidator - checks email syntax and, optionally, the domain's MX record.
"""

import logging
from typing import Any

import dns.exception
import dns.resolver
from email_validator import EmailNotValidError, validate_email

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator

logger = logging.getLogger(__name__)


def has_mx_record(domain: str, timeout: float | None = None) -> bool:
    """
    Return True if ``domain`` publishes at least one MX record.

    The lookup blocks; ``timeout`` bounds it when given.
    """
    try:
        answers = dns.resolver.resolve(domain, "MX", lifetime=timeout)
    except dns.exception.DNSException as e:
        logger.debug(f"MX lookup failed for {domain}: {e}")
        return False
    return len(answers) > 0


class EmailValidator(BaseValidator):
    """
    Validates an email address.

    Parameters:
    - no_hostname_check: Skip the MX lookup of the domain part

    The syntax check and the hostname check are independent: a badly
    formatted address that still carries a domain is looked up too, so both
    failures can be reported for one value.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)
        address = self.as_text(value)
        passed = True

        try:
            validate_email(address, check_deliverability=False)
        except EmailNotValidError:
            passed = self.fail(field_name, "Email bad formatted")

        if not params.no_hostname_check:
            parts = address.split("@")
            if len(parts) > 1:
                domain = parts[1].strip()
                if not domain or not has_mx_record(domain, timeout=self.config.mx_lookup_timeout):
                    passed = self.fail(field_name, "Email hostname don't exist")

        return passed

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.EMAIL
