"""Scripted runs over the banking model."""

from bank_demo.scenarios.demo import DemoResult, DemoScenario

__all__ = ["DemoResult", "DemoScenario"]
