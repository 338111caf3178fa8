#!/usr/bin/env python
"""
tests/conftest.py – test harness bootstrap.
Configures quiet logging and provides isolated config/data objects so tests
never depend on the process-wide singletons or a stray .env file.
"""

import pytest

from lolicon.core.contacts import Friend, Group, Member, MemberPermission
from lolicon.core.logger_setup import setup_logging
from lolicon.core.plugin_data import PluginData
from lolicon.core.settings import PluginConfig

# ------------------------------------------------------------------+
# Global logging setup                                              +
# ------------------------------------------------------------------+
setup_logging(level="WARNING")

MASTER_ID = 10001
TRUSTED_ID = 20002
LISTED_USER_ID = 30003
OTHER_USER_ID = 40004
LISTED_GROUP_ID = 500005
OTHER_GROUP_ID = 600006


@pytest.fixture
def config() -> PluginConfig:
    """PluginConfig built from explicit values only (no env, no .env)."""
    return PluginConfig(_env_file=None, master=MASTER_ID)


@pytest.fixture
def data() -> PluginData:
    return PluginData(
        trusted_users={TRUSTED_ID},
        user_set={LISTED_USER_ID},
        group_set={LISTED_GROUP_ID},
    )


@pytest.fixture
def listed_user() -> Friend:
    return Friend(id=LISTED_USER_ID)


@pytest.fixture
def other_user() -> Friend:
    return Friend(id=OTHER_USER_ID)


@pytest.fixture
def listed_group() -> Group:
    return Group(id=LISTED_GROUP_ID)


@pytest.fixture
def other_group() -> Group:
    return Group(id=OTHER_GROUP_ID)


@pytest.fixture
def admin() -> Member:
    return Member(
        id=OTHER_USER_ID,
        group_id=LISTED_GROUP_ID,
        permission=MemberPermission.ADMINISTRATOR,
    )
