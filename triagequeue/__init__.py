"""Triage queue simulator: a priority tree of patient queues, a common queue, and the menu and simulation commands that share settings and new patients through small binary files."""

__version__ = "0.1.0"