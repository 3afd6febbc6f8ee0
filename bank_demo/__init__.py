"""In-memory banking model: clients, checking and savings accounts, bank registry."""

from bank_demo.models import AccountKind, Client
from bank_demo.models.account import Account, CheckingAccount, SavingsAccount
from bank_demo.numbering import AccountNumberSequence
from bank_demo.store.bank import Bank

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountKind",
    "AccountNumberSequence",
    "Bank",
    "CheckingAccount",
    "Client",
    "SavingsAccount",
    "__version__",
]
