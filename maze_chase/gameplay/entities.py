"""
Agents and projectiles.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional
from enum import Enum, auto

from .grid import Direction


class Role(Enum):
    """Which side an agent plays."""
    ROBBER = auto()
    COP = auto()


@dataclass
class Agent:
    """
    A robber or a cop.

    Both roles share one shape and differ only by capability flags and
    starting vertex. A position of None means the agent was eliminated.
    """
    role: Role
    position: Optional[int]
    facing: Optional[Direction] = None
    can_teleport_self: bool = False
    can_teleport_other: bool = False
    can_shoot: bool = False

    @property
    def is_alive(self) -> bool:
        return self.position is not None

    def place(self, vertex: int, facing: Optional[Direction]) -> None:
        """Put the agent on vertex facing direction."""
        self.position = vertex
        self.facing = facing

    def eliminate(self) -> None:
        """Take the agent off the board."""
        self.position = None

    def __repr__(self) -> str:
        facing = self.facing.name if self.facing else None
        return f"Agent({self.role.name}, at={self.position}, facing={facing})"


def make_robber(position: int) -> Agent:
    """Create a robber: may teleport itself and the cop once each, never shoots."""
    return Agent(
        role=Role.ROBBER,
        position=position,
        can_teleport_self=True,
        can_teleport_other=True,
    )


def make_cop(position: int) -> Agent:
    """Create a cop: shoots, never teleports."""
    return Agent(role=Role.COP, position=position, can_shoot=True)


@dataclass
class Projectile:
    """A bullet or missile in flight."""
    owner: Role
    position: Optional[int]
    direction: Direction
    remaining_lifetime: int
    is_missile: bool = False

    @property
    def is_alive(self) -> bool:
        return self.position is not None

    def __repr__(self) -> str:
        kind = "Missile" if self.is_missile else "Bullet"
        return f"{kind}(at={self.position}, {self.direction.name}, life={self.remaining_lifetime})"
