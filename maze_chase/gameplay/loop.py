"""
GameLoop - serializes ticks and player input over one GameState.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework or real clock: tests post Tick and Input
events in whatever order they need.
"""
import logging
from collections import deque
from dataclasses import dataclass, replace
from typing import Optional, List, Dict, Set, Deque, Iterator, Union
from enum import Enum, auto

from .grid import Direction
from .maze import Edge, walls_of
from .entities import Role
from .movement import MovementResolver
from .projectiles import ProjectileSimulator
from .protocol import RenderSink, Occupant, cell_visual
from .state import GameState

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    RUNNING = auto()
    ROBBER_ELIMINATED = auto()


class Action(Enum):
    """Discrete player actions."""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    TELEPORT_SELF = auto()
    TELEPORT_OTHER = auto()
    SHOOT = auto()
    SHOOT_MISSILE = auto()


MOVE_DIRECTIONS = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Tick:
    """One fixed-cadence simulation step."""
    pass


@dataclass(frozen=True)
class Input:
    """A player action, applied as soon as it is dequeued."""
    role: Role
    action: Action


LoopEvent = Union[Tick, Input]


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class AgentMovedEvent(GameEvent):
    """An agent changed vertex."""
    role: Role
    from_vertex: int
    to_vertex: int
    teleported: bool = False


@dataclass
class ProjectileFiredEvent(GameEvent):
    """A bullet or missile was fired."""
    owner: Role
    vertex: int
    direction: Direction
    is_missile: bool


@dataclass
class ProjectileMovedEvent(GameEvent):
    """A projectile advanced one step."""
    owner: Role
    from_vertex: int
    to_vertex: int
    direction: Direction


@dataclass
class ProjectileDestroyedEvent(GameEvent):
    """A projectile expired or could not advance."""
    owner: Role
    vertex: int


@dataclass
class RobberEliminatedEvent(GameEvent):
    """The robber was hit."""
    vertex: int


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


class GameLoop:
    """
    Owns a GameState and applies Tick and Input events to it in order.

    Events posted while another event is being handled are appended to the
    same drain, so handlers never interleave.

    Usage:
        loop = GameLoop(new_game(rows, cols), sink=renderer)
        loop.apply(Role.COP, Action.MOVE_LEFT)
        events = loop.tick()
    """

    def __init__(self, state: GameState, sink: Optional[RenderSink] = None):
        self.state = state
        self.sink = sink
        self.resolver = MovementResolver(state.maze, state.rng)
        self.simulator = ProjectileSimulator(
            state.maze,
            state.bullet_lifetime,
            state.missile_lifetime,
            state.rng,
        )

        self.phase = GamePhase.RUNNING
        self.tick_number = 0

        self._queue: Deque[LoopEvent] = deque()
        self._draining = False
        self._events: List[GameEvent] = []

    # =========================================================================
    # EVENT QUEUE
    # =========================================================================

    def post(self, event: LoopEvent) -> List[GameEvent]:
        """
        Queue an event and process the queue.
        Returns the game events produced by this drain.
        """
        self._queue.append(event)
        if self._draining:
            return []

        self._draining = True
        self._events = []
        try:
            while self._queue:
                self._dispatch(self._queue.popleft())
        finally:
            self._draining = False
        return self._events

    def tick(self) -> List[GameEvent]:
        """Advance the simulation by one tick."""
        return self.post(Tick())

    def apply(self, role: Role, action: Action) -> List[GameEvent]:
        """Apply a player action immediately."""
        return self.post(Input(role, action))

    def _dispatch(self, event: LoopEvent) -> None:
        if isinstance(event, Tick):
            self._handle_tick()
        elif isinstance(event, Input):
            self._handle_input(event.role, event.action)

    # =========================================================================
    # TICK
    # =========================================================================

    def _handle_tick(self) -> None:
        self.tick_number += 1

        for projectile in self.state.live_projectiles():
            origin = projectile.position
            shooter = self.state.agent(projectile.owner)

            if self.simulator.advance(projectile):
                self._events.append(ProjectileMovedEvent(
                    projectile.owner, origin, projectile.position, projectile.direction
                ))
                self._notify(origin, projectile.position)
            else:
                self.simulator.release(projectile, shooter)
                self._events.append(ProjectileDestroyedEvent(projectile.owner, origin))
                logger.debug(f"Projectile from {projectile.owner.name} destroyed at {origin}")
                self._notify(origin)

        self.state.projectiles = self.state.live_projectiles()

        # Collisions are checked only after every projectile has moved
        self._check_robber_hit()

    def _check_robber_hit(self) -> None:
        robber = self.state.robber
        if not robber.is_alive or self.state.projectile_at(robber.position) is None:
            return

        vertex = robber.position
        robber.eliminate()
        self._events.append(RobberEliminatedEvent(vertex))
        logger.info(f"Robber eliminated at vertex {vertex} on tick {self.tick_number}")
        self._set_phase(GamePhase.ROBBER_ELIMINATED)
        self._notify(vertex)

    # =========================================================================
    # INPUT
    # =========================================================================

    def _handle_input(self, role: Role, action: Action) -> None:
        if self.phase != GamePhase.RUNNING:
            return

        agent = self.state.agent(role)
        other = self.state.opponent(role)
        origin = agent.position
        other_origin = other.position

        if action in MOVE_DIRECTIONS:
            if self.resolver.try_step(agent, other, MOVE_DIRECTIONS[action]):
                self._events.append(AgentMovedEvent(role, origin, agent.position))
                self._notify(origin, agent.position)

        elif action == Action.TELEPORT_SELF:
            if self.resolver.try_teleport_self(agent, other):
                self._events.append(AgentMovedEvent(role, origin, agent.position, teleported=True))
                logger.debug(f"{role.name} teleported {origin} -> {agent.position}")
                self._notify(origin, agent.position)

        elif action == Action.TELEPORT_OTHER:
            if self.resolver.try_teleport_other(agent, other):
                self._events.append(AgentMovedEvent(other.role, other_origin, other.position, teleported=True))
                logger.debug(f"{role.name} teleported {other.role.name} {other_origin} -> {other.position}")
                self._notify(other_origin, other.position)

        elif action in (Action.SHOOT, Action.SHOOT_MISSILE):
            projectile = self.simulator.fire(agent, is_missile=action == Action.SHOOT_MISSILE)
            if projectile is not None:
                self.state.projectiles.append(projectile)
                self._events.append(ProjectileFiredEvent(
                    role, projectile.position, projectile.direction, projectile.is_missile
                ))
                self._notify(projectile.position)

    def _set_phase(self, new_phase: GamePhase) -> None:
        if new_phase == self.phase:
            return
        old_phase = self.phase
        self.phase = new_phase
        self._events.append(PhaseChangedEvent(old_phase, new_phase))

    # =========================================================================
    # RENDER NOTIFICATIONS
    # =========================================================================

    def _notify(self, *vertices: Optional[int]) -> None:
        if self.sink is None:
            return
        for vertex in dict.fromkeys(vertices):
            if vertex is not None:
                self.sink.render(vertex, cell_visual(self.state, vertex))

    def render_all(self) -> None:
        """Send the full board to the sink."""
        self._notify(*self.state.grid)

    def carve(self) -> Iterator[Edge]:
        """
        Replay maze generation to the sink, one removed wall per step.

        The board is first drawn fully walled; each yielded edge has just
        been opened on both of its vertices. The final board state is sent
        once the replay is exhausted.
        """
        grid = self.state.grid
        opened: Dict[int, Set[int]] = {v: set() for v in grid}

        for vertex in grid:
            self._render_carving(vertex, opened)

        for a, b in self.state.maze.edges:
            opened[a].add(b)
            opened[b].add(a)
            self._render_carving(a, opened)
            self._render_carving(b, opened)
            yield (a, b)

        self.render_all()

    def _render_carving(self, vertex: int, opened: Dict[int, Set[int]]) -> None:
        if self.sink is None:
            return
        visual = replace(
            cell_visual(self.state, vertex),
            walls=walls_of(self.state.grid, opened, vertex),
            occupant=Occupant.NONE,
        )
        self.sink.render(vertex, visual)
