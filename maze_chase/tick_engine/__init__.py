"""
Tick engine for Maze Chase.
"""

from maze_chase.tick_engine.engine import TickEngine, TickStats

__all__ = ["TickEngine", "TickStats"]
