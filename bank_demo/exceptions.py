"""Custom exception hierarchy for bank-demo."""

from decimal import Decimal


class BankError(Exception):
    """Base exception for all bank-demo errors."""


class InvalidAmountError(BankError, ValueError):
    """Raised when a deposit or withdrawal amount is not a positive number."""


class InsufficientFundsError(BankError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: Decimal, available: Decimal) -> None:
        super().__init__(f"Insufficient funds: requested {requested}, available {available}")
        self.requested = requested
        self.available = available


class AccountNotFoundError(BankError):
    """Raised when a referenced account is not registered."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""
