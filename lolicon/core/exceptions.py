#!/usr/bin/env python
"""
core/exceptions.py - Central module for custom exception classes.
"""


class DomainError(Exception):
    """
    Base class for domain-specific exceptions with a unified error message format.
    """

    def __init__(self, message: str):
        super().__init__(f"[DomainError] {message}")


class PluginError(DomainError):
    """Generic, non-domain-specific error raised by plugin helpers."""

    pass


class InvalidSettingValueError(PluginError, ValueError):
    """Raised when a numeric setting is malformed or out of range."""

    def __init__(self, value: str, setting: str = "value"):
        super().__init__(f"invalid {setting}: {value!r}")
        self.value = value
        self.setting = setting


class InvalidProxyTypeError(PluginError, ValueError):
    """Raised when a proxy type string is not DIRECT, HTTP or SOCKS."""

    def __init__(self, value: str):
        super().__init__(f"unknown proxy type: {value!r}")
        self.value = value
