# tests/utils/test_urls.py
import pytest

from lolicon.core.settings import ProxyConfig
from lolicon.core.validation import ProxyType
from lolicon.utils.urls import build_proxy_url, get_url

URLS = {
    "mini": "https://i.pixiv.re/c/48x48/img-master/img/1_p0_square1200.jpg",
    "thumb": "https://i.pixiv.re/c/250x250_80_a2/img-master/img/1_p0_square1200.jpg",
    "small": "https://i.pixiv.re/c/540x540_70/img-master/img/1_p0_master1200.jpg",
    "regular": "https://i.pixiv.re/img-master/img/1_p0_master1200.jpg",
    "original": "https://i.pixiv.re/img-original/img/1_p0.png",
}


def test_prefers_original() -> None:
    assert get_url(URLS) == URLS["original"]


@pytest.mark.parametrize(
    "sizes,expect",
    [
        (["mini", "regular", "thumb"], "regular"),
        (["thumb", "small"], "small"),
        (["mini"], "mini"),
    ],
)
def test_picks_largest_available(sizes: list[str], expect: str) -> None:
    assert get_url({s: URLS[s] for s in sizes}) == URLS[expect]


def test_unknown_sizes_rank_last() -> None:
    assert get_url({"huge": "x", "thumb": "y"}) == "y"
    assert get_url({"huge": "x"}) == "x"


def test_empty_mapping() -> None:
    assert get_url({}) is None


@pytest.mark.parametrize(
    "type,expect",
    [
        (ProxyType.DIRECT, None),
        (ProxyType.HTTP, "http://127.0.0.1:7890"),
        (ProxyType.SOCKS, "socks5://127.0.0.1:7890"),
    ],
)
def test_build_proxy_url(type: ProxyType, expect: str | None) -> None:
    assert build_proxy_url(ProxyConfig(type=type, port=7890)) == expect
