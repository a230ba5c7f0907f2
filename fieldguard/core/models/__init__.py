"""
Core data models for the field validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .failure import Failure, FailureLog
from .registration import Registration
from .rule_kind import RuleKind
from .rule_params import (
    PARAMS_BY_KIND,
    DateParams,
    EmailParams,
    ExactParams,
    IpParams,
    IsParams,
    MaxParams,
    MinParams,
    PhoneParams,
    RequiredParams,
    RuleParams,
    UrlParams,
    ZipParams,
    decode_params,
)
from .validation_result import ValidationResult

__all__ = [
    "RuleKind",
    "RuleParams",
    "RequiredParams",
    "EmailParams",
    "MinParams",
    "MaxParams",
    "ExactParams",
    "IsParams",
    "IpParams",
    "UrlParams",
    "PhoneParams",
    "ZipParams",
    "DateParams",
    "PARAMS_BY_KIND",
    "decode_params",
    "Registration",
    "Failure",
    "FailureLog",
    "ValidationResult",
]
