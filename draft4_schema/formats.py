"""
Format checkers for the "format" keyword.

A format checker is a callable taking any JSON value and returning True when
the value conforms. Checkers accept values of types they do not describe, so
``{"format": "ipv4"}`` is satisfied by a number.
"""

import re
import socket
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

FormatChecker = Callable[[Any], bool]

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(r"\.".join([_OCTET] * 4))


def is_ipv4(value: Any) -> bool:
    """Dotted-quad IPv4 address; the whole string must match."""
    if not isinstance(value, str):
        return True
    return IPV4_PATTERN.fullmatch(value) is not None


def is_ipv6(value: Any) -> bool:
    """IPv6 address in any textual form the platform's inet_pton accepts."""
    if not isinstance(value, str):
        return True
    try:
        socket.inet_pton(socket.AF_INET6, value)
    except (OSError, ValueError):
        return False
    return True


DEFAULT_FORMATS: Mapping[str, FormatChecker] = MappingProxyType({
    "ipv4": is_ipv4,
    "ipv6": is_ipv6,
})


def build_format_registry(extra: Optional[Mapping[str, FormatChecker]] = None) -> Mapping[str, FormatChecker]:
    """
    Build the immutable format registry for a schema.

    Args:
        extra: Additional name -> checker entries; these override built-ins

    Returns:
        Read-only mapping of format name to checker

    Raises:
        TypeError: If a checker is not callable
    """
    registry: Dict[str, FormatChecker] = dict(DEFAULT_FORMATS)
    for name, checker in (extra or {}).items():
        if not callable(checker):
            raise TypeError(f"Format checker for '{name}' is not callable")
        registry[name] = checker
    return MappingProxyType(registry)
