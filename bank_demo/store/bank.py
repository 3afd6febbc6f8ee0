"""Bank registry of accounts."""

import logging
from decimal import Decimal
from typing import Iterator, TypeVar

from bank_demo.exceptions import AccountNotFoundError
from bank_demo.logging import log_fields
from bank_demo.models import (
    DEFAULT_BRANCH_CODE,
    Account,
    AccountKind,
    AccountSummary,
    CheckingAccount,
    Client,
    SavingsAccount,
)
from bank_demo.numbering import AccountNumberSequence

logger = logging.getLogger(__name__)

AccountT = TypeVar("AccountT", bound=Account)


class Bank:
    """Passive in-memory registry of accounts.

    Accounts are kept in insertion order. The bank never mutates balances
    itself; callers operate on the accounts directly.

    Parameters
    ----------
    name : str
        Bank name.
    numbers : AccountNumberSequence | None
        Counter used by the ``open_*`` helpers. A fresh sequence starting
        at 1 is created when omitted.
    branch_code : int
        Branch assigned to accounts opened through this bank.
    """

    ACCOUNT_TYPES: dict[AccountKind, type[Account]] = {
        AccountKind.CHECKING: CheckingAccount,
        AccountKind.SAVINGS: SavingsAccount,
    }

    def __init__(
        self,
        name: str,
        numbers: AccountNumberSequence | None = None,
        branch_code: int = DEFAULT_BRANCH_CODE,
    ) -> None:
        self.name = name
        self.numbers = numbers or AccountNumberSequence()
        self.branch_code = branch_code
        self._accounts: list[Account] = []

    @property
    def accounts(self) -> tuple[Account, ...]:
        """Registered accounts in insertion order."""
        return tuple(self._accounts)

    def add_account(self, account: Account) -> None:
        """Register an account. No duplicate check is made."""
        self._accounts.append(account)
        logger.debug(
            "Account %d registered with %s", account.number, self.name,
            extra=log_fields(bank=self.name, account_number=account.number),
        )

    def open_account(self, kind: AccountKind, owner: Client) -> Account:
        """Create an account of ``kind`` for ``owner`` and register it."""
        return self._open(self.ACCOUNT_TYPES[AccountKind(kind)], owner)

    def open_checking(self, owner: Client) -> CheckingAccount:
        return self._open(CheckingAccount, owner)

    def open_savings(self, owner: Client) -> SavingsAccount:
        return self._open(SavingsAccount, owner)

    def _open(self, account_cls: type[AccountT], owner: Client) -> AccountT:
        account = account_cls(owner, number=self.numbers.next(), branch_code=self.branch_code)
        self.add_account(account)
        logger.info(
            "Opened %s account %d for %s", account.kind.label.lower(), account.number, owner.name,
            extra=log_fields(
                bank=self.name,
                account_number=account.number,
                account_kind=account.kind.value,
                branch_code=account.branch_code,
            ),
        )
        return account

    def list_accounts(self) -> list[AccountSummary]:
        """Summaries of all accounts in insertion order."""
        return [account.summary() for account in self._accounts]

    def find_account(self, number: int) -> Account | None:
        """Return the first account with ``number``, or ``None``."""
        for account in self._accounts:
            if account.number == number:
                return account
        return None

    def get_account(self, number: int) -> Account:
        """Return the account with ``number``.

        Raises
        ------
        AccountNotFoundError
            If no registered account has that number.
        """
        account = self.find_account(number)
        if account is None:
            raise AccountNotFoundError(f"Account {number} not found in {self.name}")
        return account

    def total_balance(self) -> Decimal:
        """Sum of all registered balances."""
        return sum((account.balance for account in self._accounts), Decimal("0.00"))

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __repr__(self) -> str:
        return f"Bank(name={self.name!r}, accounts={len(self._accounts)})"
