"""Enumeration types for account entities."""

from enum import Enum


class AccountKind(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"

    @property
    def label(self) -> str:
        """Human readable name used in listings and statements."""
        return self.value.capitalize()
