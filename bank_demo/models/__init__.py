"""Domain models for the banking model."""

from bank_demo.models.account import (
    DEFAULT_BRANCH_CODE,
    Account,
    AccountSummary,
    CheckingAccount,
    SavingsAccount,
    Statement,
)
from bank_demo.models.client import Client
from bank_demo.models.enums import AccountKind

__all__ = [
    "DEFAULT_BRANCH_CODE",
    "Account",
    "AccountKind",
    "AccountSummary",
    "CheckingAccount",
    "Client",
    "SavingsAccount",
    "Statement",
]
