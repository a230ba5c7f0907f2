"""
Fatal errors raised by the validator engine.

These signal integration mistakes (unknown rule kinds, nothing registered,
a broken catalog). Bad input data never raises; it is collected as failures.
"""


class ValidatorConfigurationError(Exception):
    """Base class for errors raised instead of collected."""
    pass


class UnknownRuleKindError(ValidatorConfigurationError, ValueError):
    """Raised when registering a rule kind outside the catalog."""

    def __init__(self, rule_kind: str):
        self.rule_kind = rule_kind
        super().__init__(f"Unknown '{rule_kind}' validation type.")


class InvalidParameterError(ValidatorConfigurationError, ValueError):
    """Raised when rule parameters cannot be decoded for their kind."""

    def __init__(self, rule_kind: str, field_name: str, message: str):
        self.rule_kind = rule_kind
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_kind}] {field_name}: {message}")


class NoValidationsError(ValidatorConfigurationError, RuntimeError):
    """Raised when run() is called before anything was registered."""

    def __init__(self):
        super().__init__("No validations to apply")


class CatalogError(ValidatorConfigurationError, RuntimeError):
    """Raised at construction when a rule kind has no validator bound."""
    pass
