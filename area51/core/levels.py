"""
Levels - Security clearances and floors of the facility

This module defines:
- SecurityLevel: ordered clearance of an agent
- Floor: the four floors served by the elevator, with display names
  and the cyclic successor used to simulate one-floor-at-a-time travel
"""

from enum import IntEnum
from typing import Union


class SecurityLevel(IntEnum):
    """
    Ordered security clearance.

    Ordering is meaningful: CONFIDENTIAL < SECRET < TOP_SECRET.
    """
    CONFIDENTIAL = 0
    SECRET = 1
    TOP_SECRET = 2

    @classmethod
    def parse(cls, value: Union[str, int, 'SecurityLevel']) -> 'SecurityLevel':
        """
        Convert a config value to a SecurityLevel.

        Accepts a member, its integer value, or its name in any case
        ("TopSecret", "top_secret", "TOP SECRET" all work).

        Raises:
            ValueError: If the value does not name a clearance
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = _normalize(value)
        for level in cls:
            if _normalize(level.name) == key:
                return level
        raise ValueError(f"Unknown security level: {value!r}")

    def __str__(self) -> str:
        return self.name.replace('_', ' ').title().replace(' ', '')


class Floor(IntEnum):
    """Floors served by the elevator, bottom to top."""
    GROUND = 0
    SECURE = 1
    TOP_SECRET_1 = 2
    TOP_SECRET_2 = 3

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def successor(self) -> 'Floor':
        """Next floor in travel order; wraps from TOP_SECRET_2 to GROUND."""
        members = list(Floor)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, value: Union[str, int, 'Floor']) -> 'Floor':
        """
        Convert a config value to a Floor.

        Accepts a member, its integer value, its display name ("G", "T1")
        or its name ("ground", "top_secret_1").

        Raises:
            ValueError: If the value does not name a floor
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = _normalize(value)
        for floor in cls:
            if key in (_normalize(floor.name), _normalize(floor.display_name)):
                return floor
        raise ValueError(f"Unknown floor: {value!r}")

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Floor.GROUND: "G",
    Floor.SECURE: "S",
    Floor.TOP_SECRET_1: "T1",
    Floor.TOP_SECRET_2: "T2",
}


def _normalize(name) -> str:
    return str(name).strip().upper().replace('_', '').replace(' ', '').replace('-', '')
