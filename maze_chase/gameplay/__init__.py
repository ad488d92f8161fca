"""
Gameplay core: maze generation, agents, projectiles and the game loop.
NO UI DEPENDENCIES.
"""
