"""Composable signal generators, a PID controller, SISO block composites and a terminal interface."""

__version__ = "0.1.0"
__all__ = ["cli", "factory", "pid", "signals", "siso"]