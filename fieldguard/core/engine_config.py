"""
Engine configuration.

Holds the per-instance settings consulted by the built-in validators. Values
can come from keyword arguments, the ``settings:`` section of a rules YAML
file (see ``RuleConfigLoader``), or be mutated on a live engine.
"""

from pydantic import BaseModel, Field, field_validator

DEFAULT_URL_PROTOCOLS = ("http", "https")
DEFAULT_DATE_FORMAT = "d/m/Y"


class EngineConfig(BaseModel):
    """
    Settings for one Validator instance.

    Attributes:
        allowed_url_protocols: Schemes accepted by the ``url`` rule
        default_date_format: Format used by ``date`` when no ``format`` param is given
        mx_lookup_timeout: Seconds allowed for the ``email`` MX lookup (None: resolver default)
    """

    allowed_url_protocols: set[str] = Field(default_factory=lambda: set(DEFAULT_URL_PROTOCOLS))
    default_date_format: str = Field(DEFAULT_DATE_FORMAT, min_length=1)
    mx_lookup_timeout: float | None = Field(None, gt=0)

    model_config = {"validate_assignment": True}

    @field_validator("allowed_url_protocols", mode="before")
    @classmethod
    def normalize_protocols(cls, v):
        if isinstance(v, str):
            v = [v]
        return {str(p).strip() for p in v if str(p).strip()}
