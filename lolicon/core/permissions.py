#!/usr/bin/env python
"""
core/permissions.py
-------------------
Centralizes who may use the plugin and who may change its settings.

A ``None`` user or subject stands for the console, which is always allowed.
Every helper reads the process-wide ``settings`` / ``plugin_data`` unless the
caller passes its own ``config`` / ``data``.
"""

import logging
from typing import Any

from lolicon.core.contacts import Group, MemberPermission, User
from lolicon.core.logger_setup import log_context
from lolicon.core.plugin_data import PluginData, plugin_data
from lolicon.core.settings import PluginConfig, settings

log = logging.getLogger(__name__)


def _config(config: PluginConfig | None) -> PluginConfig:
    return config if config is not None else settings


def _data(data: PluginData | None) -> PluginData:
    return data if data is not None else plugin_data


def check_master(user: User | None, *, config: PluginConfig | None = None) -> bool:
    """Return True if *user* is the bot owner (or the console)."""
    return user is None or user.id == _config(config).master


def check_user_perm(user: User | None, *, data: PluginData | None = None) -> bool:
    """Return True if *user* is trusted to change settings (or is the console)."""
    return user is None or user.id in _data(data).trusted_users


def check_member_perm(user: User | None) -> bool:
    """
    check_member_perm(user) -> bool
    -------------------------------
    Returns True if *user* is a group owner or administrator.

    The console (``None``) passes; a user with no group role (a friend or a
    stranger in private chat) does not.
    """
    if user is None:
        return True
    permission = getattr(user, "permission", None)
    if permission is None:
        return False
    return permission != MemberPermission.MEMBER


def is_permitted(
    subject: Any,
    user: User | None,
    *,
    config: PluginConfig | None = None,
    data: PluginData | None = None,
) -> bool:
    """
    is_permitted(subject, user) -> bool
    -----------------------------------
    Decide whether a command from *user* in *subject* (a private chat ``User``
    or a ``Group``) may run under the configured access mode.

    * ``whitelist`` – private chats need the user listed; groups need both
      the group **and** the user listed.
    * ``blacklist`` – private chats need the user unlisted; groups need both
      the group **and** the user unlisted.
    * anything else – always permitted.
    """
    mode = _config(config).mode
    if mode not in ("whitelist", "blacklist") or subject is None:
        return True

    ids = _data(data)
    user_listed = user is not None and user.id in ids.user_set

    if mode == "whitelist":
        if isinstance(subject, User):
            allowed = subject.id in ids.user_set
        elif isinstance(subject, Group):
            allowed = subject.id in ids.group_set and user_listed
        else:
            allowed = False
    else:
        if isinstance(subject, User):
            allowed = subject.id not in ids.user_set
        elif isinstance(subject, Group):
            allowed = subject.id not in ids.group_set and not user_listed
        else:
            allowed = False

    if not allowed:
        with log_context(subject_id=getattr(subject, "id", None), user_id=getattr(user, "id", None)):
            log.debug("Denied by %s mode", mode)
    return allowed


__all__ = [
    "check_master",
    "check_member_perm",
    "check_user_perm",
    "is_permitted",
]

# End of core/permissions.py
