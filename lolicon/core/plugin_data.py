"""
core/plugin_data.py - Identifier sets the permission helpers consult.

The host framework loads and saves these; the helpers only read them.
"""

from pydantic import BaseModel


class PluginData(BaseModel):
    # Users allowed to change plugin settings
    trusted_users: set[int] = set()
    # Whitelisted or blacklisted ids, depending on PluginConfig.mode
    user_set: set[int] = set()
    group_set: set[int] = set()

    model_config = {"extra": "ignore"}


plugin_data: PluginData = PluginData()

__all__ = ["PluginData", "plugin_data"]
