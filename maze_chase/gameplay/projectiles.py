"""
Projectile flight: straight bullets and ricocheting missiles.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Optional

from .maze import MazeGraph
from .entities import Agent, Projectile

logger = logging.getLogger(__name__)


class ProjectileSimulator:
    """
    Advances projectiles one vertex per tick.

    Bullets fly straight through walls until they leave the board or run
    out of lifetime. Missiles follow open passages and turn onto a random
    open perpendicular when the way ahead is walled.
    """

    def __init__(
        self,
        maze: MazeGraph,
        bullet_lifetime: int,
        missile_lifetime: int,
        rng: Optional[random.Random] = None
    ):
        self.maze = maze
        self.grid = maze.grid
        self.bullet_lifetime = bullet_lifetime
        self.missile_lifetime = missile_lifetime
        self.rng = rng if rng is not None else random.Random()

    def fire(self, shooter: Agent, is_missile: bool = False) -> Optional[Projectile]:
        """
        Fire from the shooter's vertex in the direction it faces.
        Returns None if the shooter can't shoot right now.
        """
        if not shooter.can_shoot or not shooter.is_alive or shooter.facing is None:
            return None

        shooter.can_shoot = False
        lifetime = self.missile_lifetime if is_missile else self.bullet_lifetime
        return Projectile(
            owner=shooter.role,
            position=shooter.position,
            direction=shooter.facing,
            remaining_lifetime=lifetime,
            is_missile=is_missile,
        )

    def advance(self, projectile: Projectile) -> bool:
        """
        Move the projectile one step.
        Returns False if the projectile is destroyed this step.
        """
        if not projectile.is_alive or projectile.remaining_lifetime <= 0:
            return False

        if projectile.is_missile:
            moved = self._advance_missile(projectile)
        else:
            moved = self._advance_bullet(projectile)

        if moved:
            projectile.remaining_lifetime -= 1
        return moved

    def _advance_bullet(self, projectile: Projectile) -> bool:
        if self.grid.is_out_of_bounds(projectile.position, projectile.direction):
            return False
        projectile.position += self.grid.offset(projectile.direction)
        return True

    def _advance_missile(self, projectile: Projectile) -> bool:
        ahead = self.grid.step(projectile.position, projectile.direction)
        if self.maze.is_open(projectile.position, ahead):
            projectile.position = ahead
            return True

        # Ricochet
        turns = list(projectile.direction.perpendicular())
        self.rng.shuffle(turns)
        for turn in turns:
            target = self.grid.step(projectile.position, turn)
            if self.maze.is_open(projectile.position, target):
                logger.debug(f"Missile ricochet at {projectile.position}: {projectile.direction.name} -> {turn.name}")
                projectile.direction = turn
                projectile.position = target
                return True

        return False

    @staticmethod
    def release(projectile: Projectile, shooter: Agent) -> None:
        """Destroy the projectile and let its shooter fire again."""
        projectile.position = None
        shooter.can_shoot = True
