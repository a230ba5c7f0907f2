"""
fieldguard - declarative field validation.

Validates named field values against compact rule strings such as
``required|min[3]|email`` and collects every failure in one pass.
"""

from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.exceptions import (
    CatalogError,
    InvalidParameterError,
    NoValidationsError,
    UnknownRuleKindError,
    ValidatorConfigurationError,
)
from fieldguard.core.models import Failure, RuleKind, ValidationResult
from fieldguard.core.rules import RuleConfigBuilder, RuleConfigLoader, Validator

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "EngineConfig",
    "RuleKind",
    "Failure",
    "ValidationResult",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "ValidatorConfigurationError",
    "UnknownRuleKindError",
    "InvalidParameterError",
    "NoValidationsError",
    "CatalogError",
]
