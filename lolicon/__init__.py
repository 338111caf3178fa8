"""
Helpers for the lolicon image plugin: permission checks, tag filtering,
setting validation and proxy/URL selection.
"""

from __future__ import annotations

from lolicon.core.exceptions import (
    DomainError,
    InvalidProxyTypeError,
    InvalidSettingValueError,
    PluginError,
)
from lolicon.core.permissions import (
    check_master,
    check_member_perm,
    check_user_perm,
    is_permitted,
)
from lolicon.core.validation import ProxyType, convert_value, get_proxy_type
from lolicon.utils import (
    are_tags_allowed,
    build_proxy_url,
    get_url,
    is_tag_allowed,
    process_tags,
)

__all__ = [
    "DomainError",
    "PluginError",
    "InvalidSettingValueError",
    "InvalidProxyTypeError",
    "ProxyType",
    "check_master",
    "check_user_perm",
    "check_member_perm",
    "is_permitted",
    "convert_value",
    "get_proxy_type",
    "process_tags",
    "is_tag_allowed",
    "are_tags_allowed",
    "get_url",
    "build_proxy_url",
]
