"""Diagnostics package.

- round_trip: randomized timestamp <-> Metrum <-> civil consistency sweep
"""

__all__ = ["round_trip"]
