"""Account hierarchy: shared balance rules plus checking and savings variants."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import ClassVar, Union

from bank_demo.exceptions import InsufficientFundsError, InvalidAmountError
from bank_demo.logging import log_fields
from bank_demo.models.client import Client
from bank_demo.models.enums import AccountKind

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_CODE = 1

Amount = Union[Decimal, int, float, str]


def to_amount(value: Amount) -> Decimal:
    """Convert ``value`` to a positive ``Decimal``.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric or is not strictly positive.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}") from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {value}")
    return amount


@dataclass(frozen=True)
class Statement:
    """Point-in-time description of an account."""

    kind: AccountKind
    owner_name: str
    branch_code: int
    account_number: int
    balance: Decimal
    details: dict[str, str] = field(default_factory=dict)

    def lines(self) -> list[str]:
        """Render the statement as printable lines."""
        header = f"=== {self.kind.label} Account Statement ==="
        lines = [
            header,
            f"Holder: {self.owner_name}",
            f"Branch: {self.branch_code}",
            f"Number: {self.account_number}",
            f"Balance: {self.balance:.2f}",
        ]
        lines.extend(f"{label}: {value}" for label, value in self.details.items())
        lines.append("=" * len(header))
        return lines

    def __str__(self) -> str:
        return "\n".join(self.lines())


@dataclass(frozen=True)
class AccountSummary:
    """One row of a bank's account listing."""

    kind: AccountKind
    branch_code: int
    account_number: int
    owner_name: str

    def __str__(self) -> str:
        return (
            f"{self.kind.label} account - Branch: {self.branch_code}, "
            f"Number: {self.account_number}, Holder: {self.owner_name}"
        )


class Account(ABC):
    """Base class for bank accounts.

    Holds the balance rules shared by every variant. Variants declare their
    ``kind`` and contribute their own statement details.

    Parameters
    ----------
    owner : Client
        Account holder. Stored by reference, never copied.
    number : int
        Account number, normally handed out by a ``Bank``'s
        ``AccountNumberSequence``.
    branch_code : int
        Branch the account belongs to.
    """

    kind: ClassVar[AccountKind]

    def __init__(self, owner: Client, number: int, branch_code: int = DEFAULT_BRANCH_CODE) -> None:
        self._owner = owner
        self._number = number
        self._branch_code = branch_code
        self._balance = Decimal("0.00")

    @property
    def owner(self) -> Client:
        return self._owner

    @property
    def number(self) -> int:
        return self._number

    @property
    def branch_code(self) -> int:
        return self._branch_code

    @property
    def balance(self) -> Decimal:
        return self._balance

    def withdraw(self, amount: Amount) -> None:
        """Take ``amount`` out of the account.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        InsufficientFundsError
            If ``amount`` is greater than the balance. The balance is left
            untouched.
        """
        value = to_amount(amount)
        if value > self._balance:
            logger.warning(
                "Withdrawal of %s rejected on account %d (balance %s)",
                value, self._number, self._balance,
                extra=self._log_fields(amount=value),
            )
            raise InsufficientFundsError(requested=value, available=self._balance)
        self._balance -= value
        logger.debug(
            "Withdrew %s from account %d", value, self._number,
            extra=self._log_fields(amount=value),
        )

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the account.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        """
        value = to_amount(amount)
        self._balance += value
        logger.debug(
            "Deposited %s into account %d", value, self._number,
            extra=self._log_fields(amount=value),
        )

    def transfer(self, amount: Amount, destination: Account) -> None:
        """Move ``amount`` from this account to ``destination``.

        Any error from the withdrawal propagates unchanged and the
        destination is never credited.
        """
        value = to_amount(amount)
        self.withdraw(value)
        destination.deposit(value)
        logger.debug(
            "Transferred %s from account %d to account %d",
            value, self._number, destination.number,
            extra=self._log_fields(amount=value, destination_account_number=destination.number),
        )

    def statement(self) -> Statement:
        """Describe the account without changing it."""
        return Statement(
            kind=self.kind,
            owner_name=self._owner.name,
            branch_code=self._branch_code,
            account_number=self._number,
            balance=self._balance,
            details=self._statement_details(),
        )

    def summary(self) -> AccountSummary:
        return AccountSummary(
            kind=self.kind,
            branch_code=self._branch_code,
            account_number=self._number,
            owner_name=self._owner.name,
        )

    def _log_fields(self, **fields: object) -> dict:
        return log_fields(
            account_number=self._number,
            account_kind=self.kind.value,
            balance=self._balance,
            **fields,
        )

    @abstractmethod
    def _statement_details(self) -> dict[str, str]:
        """Variant-specific statement lines, label to value."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number={self._number}, branch_code={self._branch_code}, "
            f"owner={self._owner.name!r}, balance={self._balance})"
        )


class CheckingAccount(Account):
    """Checking account charged a fixed monthly maintenance fee."""

    kind = AccountKind.CHECKING
    MAINTENANCE_FEE: ClassVar[Decimal] = Decimal("12.00")

    def charge_maintenance_fee(self) -> bool:
        """Deduct the maintenance fee if the balance covers it.

        Unlike ``withdraw`` this never raises: an uncovered fee is reported
        by returning ``False`` and the balance is left as it was.
        """
        if self._balance < self.MAINTENANCE_FEE:
            logger.info(
                "Insufficient balance to charge maintenance fee on account %d", self._number,
                extra=self._log_fields(amount=self.MAINTENANCE_FEE, charged=False),
            )
            return False
        self._balance -= self.MAINTENANCE_FEE
        logger.info(
            "Maintenance fee of %s charged on account %d", self.MAINTENANCE_FEE, self._number,
            extra=self._log_fields(amount=self.MAINTENANCE_FEE, charged=True),
        )
        return True

    def _statement_details(self) -> dict[str, str]:
        return {"Maintenance fee": f"{self.MAINTENANCE_FEE:.2f}"}


class SavingsAccount(Account):
    """Savings account earning a fixed monthly interest rate."""

    kind = AccountKind.SAVINGS
    MONTHLY_INTEREST_RATE: ClassVar[Decimal] = Decimal("0.005")  # 0.5% per month

    def apply_interest(self) -> Decimal:
        """Credit one month of interest and return the amount credited."""
        interest = self._balance * self.MONTHLY_INTEREST_RATE
        self._balance += interest
        logger.info(
            "Interest of %s applied on account %d", interest, self._number,
            extra=self._log_fields(amount=interest),
        )
        return interest

    def _statement_details(self) -> dict[str, str]:
        return {"Monthly interest": f"{self.MONTHLY_INTEREST_RATE * 100:.1f}%"}
