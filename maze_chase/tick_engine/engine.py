"""
Tick engine implementation for Maze Chase.
Drives the game loop at a fixed cadence on the running asyncio event loop.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable

from maze_chase.gameplay.loop import GameLoop, GameEvent, Tick

logger = logging.getLogger(__name__)


@dataclass
class TickStats:
    """Statistics for tick timing."""

    tick_number: int
    duration_ms: float
    events_emitted: int


class TickEngine:
    """
    Posts a Tick to the game loop every tick_rate_ms.

    Input is posted to the same game loop by other coroutines on the same
    event loop, so ticks and input never interleave mid-update.
    """

    def __init__(
        self,
        tick_rate_ms: int,
        game_loop: GameLoop,
        on_events: Callable[[list[GameEvent]], None] | None = None,
    ) -> None:
        self._tick_rate_ms = tick_rate_ms
        self._game_loop = game_loop
        self._on_events = on_events

        self._tick_number = 0
        self._is_running = False
        self._task: asyncio.Task | None = None
        self._stop_event = asyncio.Event()

        # Tick statistics
        self._recent_stats: list[TickStats] = []
        self._max_stats_history = 100

    @property
    def tick_number(self) -> int:
        """Number of ticks processed by this engine."""
        return self._tick_number

    @property
    def is_running(self) -> bool:
        """Whether the tick engine loop is active."""
        return self._is_running

    async def start(self) -> None:
        """Start the tick engine loop."""
        if self._task is not None:
            return

        self._is_running = True
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Tick engine started (rate: {self._tick_rate_ms}ms)")

    async def stop(self) -> None:
        """Stop the tick engine loop."""
        if self._task is None:
            return

        self._is_running = False
        self._stop_event.set()

        try:
            await asyncio.wait_for(self._task, timeout=5.0)
        except asyncio.TimeoutError:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        self._task = None
        logger.info(f"Tick engine stopped after {self._tick_number} ticks")

    async def _run_loop(self) -> None:
        """
        Main tick loop.
        Fail-fast: gameplay errors propagate out of the task.
        """
        while self._is_running:
            tick_start = time.perf_counter()

            self._process_tick()

            # Calculate sleep time to maintain tick rate
            tick_duration = (time.perf_counter() - tick_start) * 1000
            sleep_time = max(0, (self._tick_rate_ms - tick_duration) / 1000)

            # Wait for either sleep time or stop signal
            try:
                await asyncio.wait_for(
                    self._stop_event.wait(),
                    timeout=sleep_time,
                )
                # Stop event was set
                break
            except asyncio.TimeoutError:
                # Normal tick interval elapsed
                pass

    def _process_tick(self) -> None:
        """Process a single tick."""
        tick_start = time.perf_counter()
        self._tick_number += 1

        events = self._game_loop.post(Tick())
        if self._on_events is not None and events:
            self._on_events(events)

        # Record stats
        tick_duration = (time.perf_counter() - tick_start) * 1000
        stats = TickStats(
            tick_number=self._tick_number,
            duration_ms=tick_duration,
            events_emitted=len(events),
        )
        self._recent_stats.append(stats)
        if len(self._recent_stats) > self._max_stats_history:
            self._recent_stats.pop(0)

        if tick_duration > self._tick_rate_ms:
            logger.warning(
                f"Tick {self._tick_number} took {tick_duration:.1f}ms "
                f"(target: {self._tick_rate_ms}ms)"
            )

    def get_recent_stats(self) -> list[TickStats]:
        """Get recent tick statistics."""
        return list(self._recent_stats)
