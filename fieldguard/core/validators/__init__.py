"""
Built-in validator implementations.

Provides one validator per rule kind: required values, email addresses,
length bounds, textual types, IP addresses, URLs, phone numbers, ZIP codes
and dates.
"""

from .base_validator import BaseValidator
from .composite_validator import DigitCodeValidator, PhoneValidator, ZipValidator
from .date_validator import DateValidator
from .email_address_validator import EmailValidator
from .ip_validator import IpValidator
from .length_validator import ExactLengthValidator, MaxLengthValidator, MinLengthValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import TypeValidator
from .url_validator import UrlValidator

__all__ = [
    "BaseValidator",
    "RequiredFieldValidator",
    "EmailValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "ExactLengthValidator",
    "TypeValidator",
    "IpValidator",
    "UrlValidator",
    "DigitCodeValidator",
    "PhoneValidator",
    "ZipValidator",
    "DateValidator",
]
