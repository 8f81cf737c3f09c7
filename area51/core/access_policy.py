"""
Clearance-based floor access rules

    G      anyone
    S      Secret and above
    T1/T2  Top Secret only
"""

from typing import Dict, Optional

from ..interfaces.access_policy import IAccessPolicy
from .levels import Floor, SecurityLevel

# Minimum clearance per floor. None means unrestricted.
FLOOR_CLEARANCE: Dict[Floor, Optional[SecurityLevel]] = {
    Floor.GROUND: None,
    Floor.SECURE: SecurityLevel.SECRET,
    Floor.TOP_SECRET_1: SecurityLevel.TOP_SECRET,
    Floor.TOP_SECRET_2: SecurityLevel.TOP_SECRET,
}


def can_access(security: SecurityLevel, floor: Floor) -> bool:
    """Return True if an agent with `security` may exit at `floor`."""
    if not isinstance(floor, Floor) or floor not in FLOOR_CLEARANCE:
        return False
    required = FLOOR_CLEARANCE[floor]
    if required is None:
        return True
    return security >= required


class ClearanceAccessPolicy(IAccessPolicy):
    """Default policy backed by FLOOR_CLEARANCE."""

    def can_access(self, security: SecurityLevel, floor: Floor) -> bool:
        return can_access(security, floor)
