"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# MAZE GRID
# =============================================================================
MAZE_ROWS = 15   # cells
MAZE_COLS = 15   # cells
START_VERTEX = 0  # maze generation root, robber spawn

# =============================================================================
# TIMING (all in milliseconds)
# =============================================================================
TICK_RATE_MS = 250            # one projectile step per tick
CARVE_DELAY_MS = 50           # pause between carved walls when animating

# =============================================================================
# PROJECTILES (lifetimes in ticks)
# =============================================================================
BULLET_LIFETIME = 10
MISSILE_LIFETIME = 20
