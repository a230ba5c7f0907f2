"""
Rule grammar, validator engine and configuration management.
"""

from .grammar import ParsedRule, parse_rule, parse_rule_string
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import Validator

__all__ = [
    "Validator",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "ParsedRule",
    "parse_rule",
    "parse_rule_string",
]
