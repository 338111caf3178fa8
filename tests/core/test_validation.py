"""
tests/core/test_validation.py - Tests for numeric setting conversion and proxy-type parsing.
"""

import pytest

from lolicon.core.exceptions import (
    DomainError,
    InvalidProxyTypeError,
    InvalidSettingValueError,
)
from lolicon.core.validation import ProxyType, convert_value, get_proxy_type


@pytest.mark.parametrize(
    "value,type,expected",
    [
        ("0", "r18", 0),
        ("1", "r18", 1),
        ("2", "r18", 2),
        ("0", "recall", 0),
        ("119", "recall", 119),
        ("0", "cooldown", 0),
        ("86400", "cooldown", 86400),
        ("+5", "cooldown", 5),
        (" 30 ", "recall", 30),
        ("-7", "anything", -7),
    ],
)
def test_convert_value_valid(value: str, type: str, expected: int) -> None:
    assert convert_value(value, type) == expected


@pytest.mark.parametrize(
    "value,type",
    [
        ("3", "r18"),
        ("-1", "r18"),
        ("120", "recall"),
        ("-1", "recall"),
        ("-1", "cooldown"),
    ],
)
def test_convert_value_out_of_range(value: str, type: str) -> None:
    with pytest.raises(InvalidSettingValueError) as excinfo:
        convert_value(value, type)
    assert excinfo.value.value == value
    assert excinfo.value.setting == type


@pytest.mark.parametrize("value", ["", "abc", "1.5", "1_000", "0x10", "2147483648", "١"])
def test_convert_value_not_an_integer(value: str) -> None:
    with pytest.raises(InvalidSettingValueError) as excinfo:
        convert_value(value, "cooldown")
    assert excinfo.value.value == value


def test_setting_errors_are_value_errors() -> None:
    # Command layers may catch either the plain or the domain exception
    with pytest.raises(ValueError):
        convert_value("oops", "recall")
    with pytest.raises(DomainError, match=r"\[DomainError\] invalid recall: '500'"):
        convert_value("500", "recall")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("DIRECT", ProxyType.DIRECT),
        ("HTTP", ProxyType.HTTP),
        ("SOCKS", ProxyType.SOCKS),
    ],
)
def test_get_proxy_type(value: str, expected: ProxyType) -> None:
    assert get_proxy_type(value) is expected


@pytest.mark.parametrize("value", ["http", "Socks", "SOCKS5", "", "NONE"])
def test_get_proxy_type_invalid(value: str) -> None:
    with pytest.raises(InvalidProxyTypeError) as excinfo:
        get_proxy_type(value)
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)


# End of tests/core/test_validation.py
