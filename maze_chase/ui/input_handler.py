"""
Input Handler - Translates key presses to gameplay actions.
This is a THIN ADAPTER - no game logic here.
"""
import logging

import pygame

from maze_chase.gameplay.entities import Role
from maze_chase.gameplay.loop import GameLoop, GameEvent, Action

logger = logging.getLogger(__name__)


# Robber: WASD to move, Q/E for teleports
ROBBER_KEYS = {
    pygame.K_w: Action.MOVE_UP,
    pygame.K_s: Action.MOVE_DOWN,
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_q: Action.TELEPORT_SELF,
    pygame.K_e: Action.TELEPORT_OTHER,
}

# Cop: arrows to move, / to shoot, . for a missile
COP_KEYS = {
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_SLASH: Action.SHOOT,
    pygame.K_PERIOD: Action.SHOOT_MISSILE,
}


class InputHandler:
    """
    Handles keyboard input and posts it to the game loop.

    Actions are applied as soon as the key is pressed, independent of ticks.
    """

    def __init__(self, game_loop: GameLoop):
        self.game_loop = game_loop

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key in ROBBER_KEYS:
            self._apply(Role.ROBBER, ROBBER_KEYS[key])
        elif key in COP_KEYS:
            self._apply(Role.COP, COP_KEYS[key])
        # Unmapped keys are ignored

        return False

    def _apply(self, role: Role, action: Action) -> list[GameEvent]:
        events = self.game_loop.apply(role, action)
        for event in events:
            logger.debug(f"{role.name} {action.name}: {event}")
        return events
