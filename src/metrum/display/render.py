"""
metrum.display.render
---------------------
Turns Metrum fields into styled `rich` renderables. Nothing here converts
time; it only pads, colours and lays out numbers it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from rich.console import Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from ..core.constants import MINUTES_PER_DAY, TICKS_PER_MINUTE
from ..core.types import MetrumDateTime


@dataclass(frozen=True)
class Palette:
    """rich style per field; an empty string means unstyled."""
    year: str = "blue"
    day: str = "bright_blue"
    minute: str = "red"
    tick: str = "yellow"
    subtick: str = "green"

    @classmethod
    def plain(cls) -> Palette:
        return cls(year="", day="", minute="", tick="", subtick="")


@dataclass(frozen=True)
class Progress:
    day: float     # fraction of the year elapsed
    minute: float  # fraction of the day
    tick: float    # fraction of the minute


def format_fields(
    year: int, day: int, minute: int, tick: int, subtick: Optional[int] = None
) -> Tuple[str, ...]:
    out = (str(year), f"{day:03d}", f"{minute:03d}", f"{tick:02d}")
    if subtick is not None:
        out += (f"{subtick:06d}",)
    return out


def clock_text(dt: MetrumDateTime, palette: Optional[Palette] = None, *, subticks: bool = False) -> Text:
    """Y'DDD MMM:TT, optionally followed by .SSSSSS."""
    pal = palette or Palette()
    fields = format_fields(dt.year, dt.day, dt.minute, dt.tick, dt.subtick if subticks else None)

    text = Text()
    text.append(fields[0], style=pal.year)
    text.append("'")
    text.append(fields[1], style=pal.day)
    text.append(" ")
    text.append(fields[2], style=pal.minute)
    text.append(":")
    text.append(fields[3], style=pal.tick)
    if subticks:
        text.append(".")
        text.append(fields[4], style=pal.subtick)
    return text


def progress(dt: MetrumDateTime) -> Progress:
    return Progress(
        day=dt.day / dt.date.days_in_year,
        minute=dt.minute / MINUTES_PER_DAY,
        tick=dt.tick / TICKS_PER_MINUTE,
    )


def clock_panel(dt: MetrumDateTime, palette: Optional[Palette] = None) -> Group:
    pal = palette or Palette()

    clock = Panel(clock_text(dt, pal), title="Metrum time")

    bars = Table.grid(padding=(0, 1))
    bars.add_column(justify="right")
    bars.add_column(ratio=1)
    p = progress(dt)
    bars.add_row("day", ProgressBar(total=1.0, completed=p.day, complete_style=pal.day or "bar.complete"))
    bars.add_row("minute", ProgressBar(total=1.0, completed=p.minute, complete_style=pal.minute or "bar.complete"))
    bars.add_row("tick", ProgressBar(total=1.0, completed=p.tick, complete_style=pal.tick or "bar.complete"))

    return Group(clock, Panel(bars, title="Progress"))
