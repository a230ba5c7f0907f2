"""
Typed parameter models, one per rule kind.

Raw parameters arrive as a string-keyed bag (``{"min": "5"}``,
``{"v4": True}``). They are decoded once, at registration, into the model
bound to the rule kind so validators get typed attribute access.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from fieldguard.core.exceptions import InvalidParameterError

from .rule_kind import RuleKind

FALSE_FLAG_VALUES = {"", "0", "false", "no", "off"}


def _as_flag(value: Any) -> bool:
    # A flag is set by its presence; only explicit false-ish values unset it
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_FLAG_VALUES
    return bool(value)


class RuleParams(BaseModel):
    """Base for all parameter models. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RequiredParams(RuleParams):
    pass


class EmailParams(RuleParams):
    no_hostname_check: bool = False

    @field_validator("no_hostname_check", mode="before")
    @classmethod
    def flag(cls, v):
        return _as_flag(v)


class MinParams(RuleParams):
    min: int | None = None


class MaxParams(RuleParams):
    max: int | None = None


class ExactParams(RuleParams):
    exact: int | None = None


class IsParams(RuleParams):
    """``type`` stays a free string: an unknown name is a collected failure."""

    type: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        if v is None:
            return None
        return str(v).strip()


class IpParams(RuleParams):
    v4: bool = False
    v6: bool = False
    reject_private: bool = False

    @field_validator("v4", "v6", "reject_private", mode="before")
    @classmethod
    def flag(cls, v):
        return _as_flag(v)

    @property
    def any_flag(self) -> bool:
        return self.v4 or self.v6 or self.reject_private


class UrlParams(RuleParams):
    pass


class PhoneParams(RuleParams):
    pass


class ZipParams(RuleParams):
    pass


class DateParams(RuleParams):
    """``format`` uses PHP-style tokens (``d/m/Y``); None means the engine default."""

    format: str | None = None


PARAMS_BY_KIND: dict[RuleKind, type[RuleParams]] = {
    RuleKind.REQUIRED: RequiredParams,
    RuleKind.EMAIL: EmailParams,
    RuleKind.MIN: MinParams,
    RuleKind.MAX: MaxParams,
    RuleKind.EXACT: ExactParams,
    RuleKind.IS: IsParams,
    RuleKind.IP: IpParams,
    RuleKind.URL: UrlParams,
    RuleKind.PHONE: PhoneParams,
    RuleKind.ZIP: ZipParams,
    RuleKind.DATE: DateParams,
}


def decode_params(
    rule_kind: RuleKind,
    field_name: str,
    raw: dict[str, Any] | RuleParams | None,
) -> RuleParams:
    """
    Decode a raw parameter bag into the typed model for ``rule_kind``.

    Args:
        rule_kind: Kind the parameters belong to
        field_name: Field being registered (for error messages)
        raw: Raw string-keyed parameters, an already-typed model, or None

    Returns:
        The typed parameter model

    Raises:
        InvalidParameterError: If a parameter has the wrong shape for the kind
    """
    model = PARAMS_BY_KIND[rule_kind]

    if isinstance(raw, model):
        return raw
    if isinstance(raw, RuleParams):
        raise InvalidParameterError(
            rule_kind.value,
            field_name,
            f"Expected {model.__name__}, got {type(raw).__name__}",
        )

    try:
        return model.model_validate(dict(raw or {}))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidParameterError(rule_kind.value, field_name, details) from e
