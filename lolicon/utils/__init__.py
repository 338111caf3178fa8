"""Utility functions for the plugin."""

from .tags import are_tags_allowed, is_tag_allowed, process_tags
from .urls import build_proxy_url, get_url

__all__ = [
    "process_tags",
    "is_tag_allowed",
    "are_tags_allowed",
    "get_url",
    "build_proxy_url",
]
