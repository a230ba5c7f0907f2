"""
Rule grammar parser.

Turns compact rule strings into (kind, params) pairs::

    "required|min[3]|ip[v4,reject_private]|date[format=Y-m-d]"

Rule specs are separated by ``|``. Each spec is ``kind`` or
``kind[p1,p2=v2,...]``. A parameter without ``=`` is positional for
``min``/``max``/``exact`` (keyed by the kind) and ``is`` (keyed ``type``);
for every other kind it is a flag set to True.
"""

from typing import Any, NamedTuple

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ","

# Positional parameter key per kind
POSITIONAL_KEYS = {
    "min": "min",
    "max": "max",
    "exact": "exact",
    "is": "type",
}


class ParsedRule(NamedTuple):
    """One rule spec split into its kind and raw parameters."""

    kind: str
    params: dict[str, Any]


def parse_params(kind: str, raw: str) -> dict[str, Any]:
    """
    Parse the text between brackets into a parameter dict.

    Args:
        kind: Rule kind the parameters belong to (decides positional keys)
        raw: Comma separated parameter list, without the brackets

    Returns:
        Mapping of parameter name to value (str, or True for flags)
    """
    params: dict[str, Any] = {}

    for item in raw.split(PARAM_SEPARATOR):
        key, sep, value = item.partition("=")
        key = key.strip()

        if not sep:
            if not key:
                continue
            if kind in POSITIONAL_KEYS:
                params[POSITIONAL_KEYS[kind]] = key
            else:
                params[key] = True
        else:
            params[key] = value.strip()

    return params


def parse_rule(spec: str) -> ParsedRule:
    """Split a single ``kind[params]`` spec."""
    kind, bracket, raw = spec.strip().rstrip("]").partition("[")
    kind = kind.strip()
    params = parse_params(kind, raw) if bracket else {}
    return ParsedRule(kind=kind, params=params)


def parse_rule_string(rule_string: str) -> list[ParsedRule]:
    """
    Parse a full pipe-separated rule string.

    Malformed specs are not rejected here: an unrecognized kind surfaces as
    UnknownRuleKindError when the engine registers it.
    """
    return [parse_rule(spec) for spec in rule_string.split(RULE_SEPARATOR)]
