"""
Registration model: a stored (field, rule kind) -> (value, params) binding.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .rule_kind import RuleKind
from .rule_params import RuleParams


class Registration(BaseModel):
    """
    A rule awaiting evaluation.

    Attributes:
        field_name: Field the rule applies to
        rule_kind: Which validator runs
        value: Candidate value (usually a string; None when absent)
        params: Typed parameters decoded for ``rule_kind``
    """

    model_config = ConfigDict(frozen=True)

    field_name: str
    rule_kind: RuleKind
    value: Any = None
    params: RuleParams

    @property
    def is_empty(self) -> bool:
        """True when the value is absent or the empty string."""
        return self.value is None or self.value == ""
