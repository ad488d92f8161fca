"""
Maze Chase - a cop-and-robber pursuit on a procedurally carved maze.
"""

__version__ = "0.1.0"
