#!/usr/bin/env python
"""
core/validation.py - Pure helper functions for validating user-supplied setting values.

Command handlers pass raw strings from chat straight in; anything malformed
raises a ``ValueError`` subclass carrying the offending text so the caller can
echo it back to the user.
"""

import re
from enum import Enum

from lolicon.core.exceptions import InvalidProxyTypeError, InvalidSettingValueError

# Signed 32-bit range accepted for every numeric setting
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Plain base-10 integer: optional sign, ASCII digits only (no "1_000", no "1.0")
INTEGER_REGEX = re.compile(r"^[+-]?[0-9]+$")

R18_VALUES = frozenset({0, 1, 2})
RECALL_LIMIT = 120  # seconds, exclusive


class ProxyType(str, Enum):
    DIRECT = "DIRECT"
    HTTP = "HTTP"
    SOCKS = "SOCKS"


def parse_int(value: str, setting: str = "value") -> int:
    """Parse *value* as a signed 32-bit integer or raise InvalidSettingValueError."""
    text = value.strip()
    if not INTEGER_REGEX.match(text):
        raise InvalidSettingValueError(value, setting)
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        raise InvalidSettingValueError(value, setting)
    return number


def convert_value(value: str, type: str) -> int:
    """
    convert_value(value, type) -> int
    ---------------------------------
    Convert *value* into an integer suitable for the setting named *type*.

    * ``r18``      – 0 (safe), 1 (r18 only) or 2 (mixed)
    * ``recall``   – seconds before recalling a message, 0 <= v < 120
    * ``cooldown`` – seconds between requests, v >= 0

    Any other setting name is only checked for being an integer.

    Raises:
        InvalidSettingValueError: if *value* is not an integer or is out of range.
    """
    setting = parse_int(value, type)
    if type == "r18":
        if setting not in R18_VALUES:
            raise InvalidSettingValueError(value, type)
    elif type == "recall":
        if setting < 0 or setting >= RECALL_LIMIT:
            raise InvalidSettingValueError(value, type)
    elif type == "cooldown":
        if setting < 0:
            raise InvalidSettingValueError(value, type)
    return setting


def get_proxy_type(value: str) -> ProxyType:
    """Return the ProxyType named by *value* (case-sensitive)."""
    try:
        return ProxyType(value)
    except ValueError:
        raise InvalidProxyTypeError(value) from None


__all__ = [
    "ProxyType",
    "convert_value",
    "get_proxy_type",
    "parse_int",
]
