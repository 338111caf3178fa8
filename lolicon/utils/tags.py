"""Tag query parsing and allow/deny filtering.

Filter patterns come from ``PluginConfig.tag_filter`` and are matched
case-insensitively against the *whole* tag, so ``r-18`` does not block
``r-18g`` unless the pattern says ``r-18.*``.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Sequence

from lolicon.core.settings import PluginConfig, settings

log = logging.getLogger(__name__)

__all__ = ["are_tags_allowed", "is_tag_allowed", "process_tags"]


def process_tags(query: str) -> list[list[str]]:
    """
    Split a tag query into AND groups of OR alternatives.

        >>> process_tags("white stockings|black stockings&maid")
        [['white stockings', 'black stockings'], ['maid']]

    Segments are not trimmed and empty ones are kept.
    """
    return [group.split("|") for group in query.split("&")]


@functools.lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def _matches_any(tag: str, patterns: Iterable[str]) -> bool:
    return any(_compile(p).fullmatch(tag) for p in patterns)


def is_tag_allowed(tag: str, *, config: PluginConfig | None = None) -> bool:
    cfg = config if config is not None else settings
    mode = cfg.tag_filter_mode
    if mode == "whitelist":
        return _matches_any(tag, cfg.tag_filter)
    if mode == "blacklist":
        return not _matches_any(tag, cfg.tag_filter)
    return True


def are_tags_allowed(tags: Sequence[str], *, config: PluginConfig | None = None) -> bool:
    """
    Return True if an image carrying *tags* may be sent.

    * ``whitelist`` – at least one tag must match a filter.
    * ``blacklist`` – no tag may match a filter.
    * ``none`` (or anything else) – always True.
    """
    cfg = config if config is not None else settings
    mode = cfg.tag_filter_mode
    if mode == "whitelist":
        allowed = any(is_tag_allowed(tag, config=cfg) for tag in tags)
    elif mode == "blacklist":
        allowed = all(is_tag_allowed(tag, config=cfg) for tag in tags)
    else:
        return True
    if not allowed:
        log.debug("Tags rejected by %s filter: %s", mode, list(tags))
    return allowed
