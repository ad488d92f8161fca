"""
Protocol and types for render sinks.

The simulation never holds rendering handles. It describes how a vertex
should look and hands that description to whatever sink is attached.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, Protocol, runtime_checkable

from .grid import Direction
from .state import GameState


class Occupant(Enum):
    """What is drawn on a vertex."""
    NONE = auto()
    ROBBER = auto()
    COP = auto()
    BULLET = auto()
    MISSILE = auto()


class Marker(Enum):
    """Terminal highlighting."""
    NONE = auto()
    START = auto()
    GOAL = auto()


@dataclass(frozen=True)
class CellVisual:
    """Visual state of a single vertex."""
    walls: FrozenSet[Direction]
    occupant: Occupant = Occupant.NONE
    marker: Marker = Marker.NONE


@runtime_checkable
class RenderSink(Protocol):
    """
    Receives a notification for every vertex whose visual state changed.
    """

    def render(self, vertex: int, visual: CellVisual) -> None:
        ...


def cell_visual(state: GameState, vertex: int) -> CellVisual:
    """
    Derive the visual state of a vertex.
    Projectiles are drawn over agents; the robber is drawn over the cop.
    """
    projectile = state.projectile_at(vertex)
    if projectile is not None:
        occupant = Occupant.MISSILE if projectile.is_missile else Occupant.BULLET
    elif state.robber.position == vertex:
        occupant = Occupant.ROBBER
    elif state.cop.position == vertex:
        occupant = Occupant.COP
    else:
        occupant = Occupant.NONE

    if vertex == state.start_vertex:
        marker = Marker.START
    elif vertex == state.goal_vertex:
        marker = Marker.GOAL
    else:
        marker = Marker.NONE

    return CellVisual(walls=state.maze.walls(vertex), occupant=occupant, marker=marker)
