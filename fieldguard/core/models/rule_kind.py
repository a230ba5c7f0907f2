"""
RuleKind enumeration: the closed catalog of validation categories.
"""

from enum import Enum


class RuleKind(str, Enum):
    """
    Validation categories understood by the engine.

    The set is fixed; the engine refuses to register anything else.
    """

    REQUIRED = "required"
    EMAIL = "email"
    MIN = "min"
    MAX = "max"
    EXACT = "exact"
    IS = "is"
    IP = "ip"
    URL = "url"
    PHONE = "phone"
    ZIP = "zip"
    DATE = "date"

    @classmethod
    def names(cls) -> list[str]:
        """Return the kind names in declaration order."""
        return [kind.value for kind in cls]

    @classmethod
    def lookup(cls, name: str) -> "RuleKind | None":
        """Return the kind for ``name``, or None if it is not in the catalog."""
        try:
            return cls(name)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value
