# tests/test_render.py

from io import StringIO

import pytest
from rich.console import Console

from metrum import MetrumDateTime, fixed_clock, UtcFields
from metrum.display import live, render
from metrum.display.render import Palette, clock_panel, clock_text, format_fields, progress


def _console() -> Console:
    return Console(file=StringIO(), width=60, color_system=None, highlight=False)


def test_format_fields_padding():
    assert format_fields(2024, 5, 7, 3) == ("2024", "005", "007", "03")
    assert format_fields(-3, 300, 999, 99, 42) == ("-3", "300", "999", "99", "000042")


def test_clock_text(moon_landing):
    assert clock_text(moon_landing).plain == "1969'200 845:60"
    assert clock_text(moon_landing, subticks=True).plain == "1969'200 845:60.160000"


def test_clock_text_styles(moon_landing):
    text = clock_text(moon_landing, Palette())
    styles = {str(span.style) for span in text.spans}
    assert {"blue", "bright_blue", "red", "yellow"} <= styles
    assert clock_text(moon_landing, Palette.plain()).spans == []


def test_progress(moon_landing):
    p = progress(moon_landing)
    assert p.day == pytest.approx(200 / 365)
    assert p.minute == pytest.approx(0.845)
    assert p.tick == pytest.approx(0.6)
    assert progress(MetrumDateTime.new(2000, 365, 1000, 100)).day == pytest.approx(365 / 366)


def test_clock_panel_renders(moon_landing):
    console = _console()
    console.print(clock_panel(moon_landing))
    out = console.file.getvalue()
    assert "Metrum time" in out
    assert "Progress" in out
    assert "1969'200 845:60" in out


def test_live_run_stops_after_frames():
    console = _console()
    clock = fixed_clock(UtcFields(1969, 7, 20, 20, 17, 40, 0))
    assert live.run(clock, interval=0, frames=3, console=console) == 3
    assert "1969'200 845:60" in console.file.getvalue()


def test_live_run_exits_on_interrupt(monkeypatch):
    def interrupt(_):
        raise KeyboardInterrupt

    monkeypatch.setattr(live.time, "sleep", interrupt)
    clock = fixed_clock(UtcFields(2000, 1, 1, 0, 0, 0, 0))
    assert live.run(clock, frames=None, console=_console()) == 1


def test_clock_panel_bars_come_from_progress(monkeypatch, moon_landing):
    seen = []
    original = render.progress

    def recording(dt):
        seen.append(dt)
        return original(dt)

    monkeypatch.setattr(render, "progress", recording)
    console = _console()
    console.print(clock_panel(moon_landing))
    assert seen == [moon_landing]


def test_progress_uses_year_length():
    assert progress(MetrumDateTime.new(1900, 182, 0, 0)).day == pytest.approx(182 / 365)
    assert progress(MetrumDateTime.new(2000, 183, 0, 0)).day == pytest.approx(0.5)
