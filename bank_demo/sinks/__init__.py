"""Output sinks for presenting bank data."""

from bank_demo.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
