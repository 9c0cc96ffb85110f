from __future__ import annotations

import time
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.live import Live

from ..core.clock import Clock, system_clock
from ..core.constants import MILLIS_PER_TICK
from ..core.types import MetrumDateTime
from .render import Palette, clock_panel

TICK_SECONDS = MILLIS_PER_TICK / 1000


def run(
    clock: Optional[Clock] = None,
    *,
    interval: float = TICK_SECONDS,
    frames: Optional[int] = None,
    palette: Optional[Palette] = None,
    console: Optional[Console] = None,
) -> int:
    """
    Redraw the clock panel every `interval` seconds until Ctrl-C, or until
    `frames` frames have been drawn. Returns the number of frames drawn.
    """
    clock = clock or system_clock
    logger.debug("live clock started (interval={}s, frames={})", interval, frames)

    with Live(clock_panel(MetrumDateTime.now(clock), palette), console=console, auto_refresh=False) as live:
        drawn = 1
        try:
            while frames is None or drawn < frames:
                time.sleep(interval)
                live.update(clock_panel(MetrumDateTime.now(clock), palette), refresh=True)
                drawn += 1
        except KeyboardInterrupt:
            logger.debug("live clock interrupted")

    logger.debug("live clock stopped after {} frames", drawn)
    return drawn
