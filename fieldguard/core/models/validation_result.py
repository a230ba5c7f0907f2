"""
ValidationResult model representing the outcome of one evaluation pass (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator

from .failure import Failure


class ValidationResult(BaseModel):
    """
    Outcome of running the engine once.

    Note: ValidationResult is ephemeral, built from the engine's failure log
    after run() for display or serialization.

    Attributes:
        passed: Overall validation status
        failures: Every collected failure, in the order it was appended
        fields_checked: Number of distinct fields with registrations
    """

    passed: bool
    failures: list[Failure] = Field(default_factory=list)
    fields_checked: int = Field(0, ge=0)

    @field_validator("failures")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failures is empty."""
        if info.data.get("passed") and len(v) > 0:
            raise ValueError("passed=True but failures is not empty")
        return v

    def errors_by_field(self) -> dict[str, list[str]]:
        """Group failure messages by field, preserving first-seen field order."""
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped

    model_config = {
        "json_schema_extra": {
            "example": {
                "passed": False,
                "failures": [
                    {"field": "name", "message": "Required and not empty"},
                    {"field": "zip", "message": "Not integer"},
                    {"field": "zip", "message": "Will be 5 lenght"},
                ],
                "fields_checked": 3,
            }
        }
    }
