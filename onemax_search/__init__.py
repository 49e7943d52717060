"""Exhaustive search and hill climbing on OneMax, with run averaging and cooling schedules."""

__version__ = "0.1.0"