"""
Access Policy Interface

Defines how the elevator decides whether its door may open for an agent.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.levels import Floor, SecurityLevel


class IAccessPolicy(ABC):
    """
    Interface for floor access decisions

    Implementations must be pure: the same (security, floor) pair always
    yields the same answer and nothing is mutated.

    Ground must always be accessible. The elevator's retry-to-Ground
    handling terminates only under that condition.
    """

    @abstractmethod
    def can_access(self, security: "SecurityLevel", floor: "Floor") -> bool:
        """
        Decide whether an agent with the given clearance may exit at a floor

        Args:
            security: Clearance of the agent
            floor: Floor the agent asked for

        Returns:
            True if the door may open, False if it stays closed
        """
        pass
