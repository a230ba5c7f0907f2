"""
IpValidator - validates IP addresses by version and address range.
"""

import ipaddress
from typing import Any

from fieldguard.core.models import RuleKind

from .base_validator import BaseValidator

PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(net)
    for net in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "fc00::/7")
)

RESERVED_NETWORKS = tuple(
    ipaddress.ip_network(net)
    for net in (
        "0.0.0.0/8",
        "127.0.0.0/8",
        "169.254.0.0/16",
        "240.0.0.0/4",
        "::/128",
        "::1/128",
        "::ffff:0:0/96",
        "fe80::/10",
    )
)


def parse_ip(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    """Parse ``value`` as an IP address, returning None if it is not one."""
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


def _in_networks(address, networks) -> bool:
    return any(address.version == net.version and address in net for net in networks)


class IpValidator(BaseValidator):
    """
    Validates an IP address.

    Parameters (flags, independently combinable):
    - v4: Must be an IPv4 address
    - v6: Must be an IPv6 address
    - reject_private: Must not fall in a private or reserved range

    With no flag set, any valid IPv4 or IPv6 address passes.
    """

    def validate(self, field_name: str, value: Any, params=None) -> bool:
        params = self.resolve_params(field_name, params)
        address = parse_ip(self.as_text(value))
        passed = True

        if params.v4 and not isinstance(address, ipaddress.IPv4Address):
            passed = self.fail(field_name, "IpV4 not valid")

        if params.v6 and not isinstance(address, ipaddress.IPv6Address):
            passed = self.fail(field_name, "IpV6 not valid")

        if params.reject_private:
            if address is None or _in_networks(address, PRIVATE_NETWORKS):
                passed = self.fail(field_name, "Private ip not allowed")
            if address is None or _in_networks(address, RESERVED_NETWORKS):
                passed = self.fail(field_name, "Reserved ip not allowed")

        if not params.any_flag and address is None:
            passed = self.fail(field_name, "Ip not valid")

        return passed

    @property
    def rule_kind(self) -> RuleKind:
        return RuleKind.IP
