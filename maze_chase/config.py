"""
Configuration management for Maze Chase.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_chase.gameplay.constants import (
    MAZE_ROWS,
    MAZE_COLS,
    TICK_RATE_MS,
    CARVE_DELAY_MS,
    BULLET_LIFETIME,
    MISSILE_LIFETIME,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_CHASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Maze
    rows: int = Field(default=MAZE_ROWS, gt=0, description="Maze height in cells")
    cols: int = Field(default=MAZE_COLS, gt=0, description="Maze width in cells")
    seed: Optional[int] = Field(
        default=None,
        description="Seed for maze generation and random abilities. None picks a fresh one"
    )

    # Projectiles
    bullet_lifetime: int = Field(
        default=BULLET_LIFETIME,
        gt=0,
        description="Ticks a straight bullet flies before it expires"
    )
    missile_lifetime: int = Field(
        default=MISSILE_LIFETIME,
        gt=0,
        description="Ticks a missile flies before it expires"
    )

    # Tick Engine
    tick_rate_ms: int = Field(
        default=TICK_RATE_MS,
        gt=0,
        description="Tick rate in milliseconds"
    )

    # Display
    carve_delay_ms: int = Field(
        default=CARVE_DELAY_MS,
        ge=0,
        description="Delay between carved walls when animating generation. 0 skips the animation"
    )
    cell_size: int = Field(default=30, gt=0, description="Cell size in pixels")
    frame_rate: int = Field(default=60, gt=0, description="Frames per second for the window")

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
