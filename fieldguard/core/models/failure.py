"""
Failure model: one collected validation violation.
"""

from pydantic import BaseModel, ConfigDict, Field


class Failure(BaseModel):
    """
    A (field, message) record appended when a rule is violated.

    Attributes:
        field: Name of the field that failed
        message: Human-readable description, suitable for direct display
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "field": "email",
                "message": "Email bad formatted",
            }
        },
    )

    field: str
    message: str = Field(..., min_length=1)


class FailureLog:
    """
    Append-only, ordered collection of failures for one engine instance.
    """

    def __init__(self):
        self._failures: list[Failure] = []

    def add(self, field: str, message: str) -> None:
        self._failures.append(Failure(field=field, message=message))

    def snapshot(self) -> list[Failure]:
        """Return a copy of the failures collected so far."""
        return list(self._failures)

    def for_field(self, field: str) -> list[Failure]:
        return [f for f in self._failures if f.field == field]

    def __len__(self) -> int:
        return len(self._failures)

    def __bool__(self) -> bool:
        return bool(self._failures)

    def __iter__(self):
        return iter(list(self._failures))
