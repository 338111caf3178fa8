"""
Settings for the lolicon plugin. Proxy options live in PluginConfig.proxy (see ProxyConfig).
"""

import json
import re
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode

from lolicon.core.validation import ProxyType, convert_value, get_proxy_type

FilterMode = Literal["none", "whitelist", "blacklist"]


class ProxyConfig(BaseModel):
    type: ProxyType = ProxyType.DIRECT
    hostname: str = "127.0.0.1"
    port: int = 1080

    model_config = {"extra": "ignore"}

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> Any:  # noqa: D401
        """Accept the same strings as the `proxy` command."""
        if isinstance(v, str):
            return get_proxy_type(v)
        return v


class PluginConfig(BaseSettings):
    if TYPE_CHECKING:  # pragma: no cover

        def __init__(self, **data: Any) -> None: ...

    """
    Settings for the lolicon plugin.

    Access control:
        master (env: LOLICON_MASTER)
        mode (env: LOLICON_MODE) – none / whitelist / blacklist
    Tag filtering:
        tag_filter_mode (env: LOLICON_TAG_FILTER_MODE)
        tag_filter (env: LOLICON_TAG_FILTER) – comma-separated regexes or a JSON array
    Proxy options live in PluginConfig.proxy (env: LOLICON_PROXY__TYPE, ...).
    """
    # Bot owner user ID
    master: int = 0

    mode: FilterMode = "none"

    # --- Tunable plugin behaviour ---
    r18: int = 0
    recall: int = 30  # seconds before a sent image is recalled, 0 = never
    cooldown: int = 60  # seconds between requests per user

    tag_filter_mode: FilterMode = "none"
    tag_filter: Annotated[list[str], NoDecode] = []

    proxy: ProxyConfig = ProxyConfig()

    model_config = {
        "env_prefix": "LOLICON_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "env_nested_delimiter": "__",  # Enable nested env vars like LOLICON_PROXY__TYPE
    }

    @field_validator("r18", "recall", "cooldown", mode="before")
    @classmethod
    def _check_range(cls, v: Any, info: ValidationInfo) -> Any:
        # Same range rules as the `set` command
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return convert_value(str(v), info.field_name)
        return v

    @field_validator("tag_filter", mode="before")
    @classmethod
    def _split_csv(cls, v: Any) -> list[str]:  # noqa: D401
        """
        Allow simple comma‑separated strings in .env:

            LOLICON_TAG_FILTER=guro,.*gore.*

        A pattern containing a comma (e.g. `r-1{1,2}8`) needs the JSON form:

            LOLICON_TAG_FILTER=["r-1{1,2}8", "guro"]
        """
        if isinstance(v, str) and v.lstrip().startswith("["):
            items = json.loads(v)
            if not isinstance(items, list) or not all(isinstance(p, str) for p in items):
                raise ValueError("tag filter JSON must be an array of strings")
            return items
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        if isinstance(v, (list, tuple, set)):
            return [str(item) for item in v]
        return []

    @field_validator("tag_filter")
    @classmethod
    def _must_compile(cls, v: list[str]) -> list[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"invalid tag filter {pattern!r}: {exc}") from exc
        return v


settings: "PluginConfig" = PluginConfig()

__all__ = [
    "FilterMode",
    "PluginConfig",
    "ProxyConfig",
    "settings",
]
