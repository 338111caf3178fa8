"""
core/contacts.py - Identity objects handed to the permission helpers.

The chat framework owns the real contact objects; these dataclasses describe
the minimal shape the helpers read (``id`` and, for group members,
``permission``). Framework adapters either build them directly or subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MemberPermission(IntEnum):
    """Role of a member inside a group, ordered by level."""

    MEMBER = 0
    ADMINISTRATOR = 1
    OWNER = 2


@dataclass(frozen=True)
class Contact:
    id: int


@dataclass(frozen=True)
class User(Contact):
    pass


@dataclass(frozen=True)
class Friend(User):
    pass


@dataclass(frozen=True)
class Member(User):
    group_id: int = 0
    permission: MemberPermission = MemberPermission.MEMBER


@dataclass(frozen=True)
class Group(Contact):
    pass


__all__ = [
    "Contact",
    "Friend",
    "Group",
    "Member",
    "MemberPermission",
    "User",
]
