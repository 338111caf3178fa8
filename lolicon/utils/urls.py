from __future__ import annotations

from collections.abc import Mapping

from lolicon.core.settings import ProxyConfig
from lolicon.core.validation import ProxyType

# Image sizes served by the API, largest first
SIZE_ORDER: dict[str, int] = {
    "original": 0,
    "regular": 1,
    "small": 2,
    "thumb": 3,
    "mini": 4,
}

_PROXY_SCHEMES: dict[ProxyType, str] = {
    ProxyType.HTTP: "http",
    ProxyType.SOCKS: "socks5",
}


def get_url(urls: Mapping[str, str]) -> str | None:
    """
    Pick the URL of the largest available size from an API ``urls`` mapping.

    Unknown size keys rank after every known one; ``None`` for an empty mapping.
    """
    if not urls:
        return None
    best = min(urls, key=lambda size: SIZE_ORDER.get(size, len(SIZE_ORDER)))
    return urls[best]


def build_proxy_url(proxy: ProxyConfig) -> str | None:
    """
    Return the proxy URL an HTTP client should use, or ``None`` to connect directly.

        HTTP  -> http://host:port
        SOCKS -> socks5://host:port
    """
    scheme = _PROXY_SCHEMES.get(proxy.type)
    if scheme is None:
        return None
    return f"{scheme}://{proxy.hostname}:{proxy.port}"
