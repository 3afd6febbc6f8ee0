"""Demonstration scenario exercising every account operation."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from bank_demo.config import BankConfig
from bank_demo.exceptions import BankError
from bank_demo.generators import ClientGenerator
from bank_demo.models import CheckingAccount, Client, SavingsAccount
from bank_demo.numbering import AccountNumberSequence
from bank_demo.sinks import ConsoleSink
from bank_demo.store import Bank

logger = logging.getLogger(__name__)

# Placeholder CPFs: Client does not validate national ids, and these do not
# pass is_valid_cpf. Use generate_clients for check-digit valid ones.
DEFAULT_CLIENTS = (
    Client(name="João Silva", national_id="123.456.789-00", phone="(11) 99999-9999"),
    Client(name="Maria Santos", national_id="987.654.321-00", phone="(11) 88888-8888"),
)


@dataclass
class DemoResult:
    """Objects and outcomes produced by a demonstration run."""

    bank: Bank
    checking: CheckingAccount
    savings: SavingsAccount
    transfer_ok: bool
    withdrawal_ok: bool
    fee_charged: bool
    interest: Decimal


class DemoScenario:
    """Walk two clients through deposits, transfers, fees and interest.

    The run:
    - Opens a checking account for the first client and a savings account
      for the second
    - Deposits, lists accounts and prints statements
    - Transfers from checking to savings and withdraws from savings,
      reporting failures instead of raising them
    - Charges the maintenance fee and applies interest
    - Prints final statements through the shared ``Account`` interface
    """

    def __init__(self, config: BankConfig | None = None, sink: ConsoleSink | None = None) -> None:
        self.config = config or BankConfig()
        self.sink = sink or ConsoleSink(
            format=self.config.output.format,
            pretty=self.config.output.pretty_json,
        )

    def _clients(self) -> tuple[Client, Client]:
        demo = self.config.demo
        if demo.generate_clients:
            generator = ClientGenerator(seed=demo.seed, locale=demo.locale)
            first, second = generator.generate_batch(2)
            return first, second
        first, second = DEFAULT_CLIENTS
        # Fresh copies so a run never mutates the module-level defaults
        return (
            Client(first.name, first.national_id, first.phone),
            Client(second.name, second.national_id, second.phone),
        )

    def run(self) -> DemoResult:
        """Run the scenario and return the resulting bank and outcomes."""
        demo = self.config.demo
        first, second = self._clients()

        bank = Bank(
            self.config.bank_name,
            numbers=AccountNumberSequence(self.config.first_account_number),
            branch_code=self.config.branch_code,
        )
        checking = bank.open_checking(first)
        savings = bank.open_savings(second)
        logger.info("Demo bank %s ready with %d accounts", bank.name, len(bank))

        self.sink.write_message("1. Initial deposits")
        checking.deposit(demo.initial_checking_deposit)
        savings.deposit(demo.initial_savings_deposit)
        self.sink.write_message(
            f"Deposited {demo.initial_checking_deposit:.2f} into checking account {checking.number}"
        )
        self.sink.write_message(
            f"Deposited {demo.initial_savings_deposit:.2f} into savings account {savings.number}"
        )

        self.sink.write_message("2. Bank accounts")
        self.sink.write_accounts(bank.name, bank.list_accounts())

        self.sink.write_message("3. Account statements")
        self._write_statements(bank)

        self.sink.write_message("4. Transfer")
        try:
            checking.transfer(demo.transfer_amount, savings)
        except BankError as exc:
            logger.warning("Demo transfer failed: %s", exc)
            self.sink.write_message(f"Transfer failed: {exc}")
            transfer_ok = False
        else:
            self.sink.write_message(
                f"Transferred {demo.transfer_amount:.2f} from checking to savings"
            )
            transfer_ok = True

        self.sink.write_message("5. Withdrawal")
        try:
            savings.withdraw(demo.savings_withdrawal)
        except BankError as exc:
            logger.warning("Demo withdrawal failed: %s", exc)
            self.sink.write_message(f"Withdrawal failed: {exc}")
            withdrawal_ok = False
        else:
            self.sink.write_message(f"Withdrew {demo.savings_withdrawal:.2f} from savings")
            withdrawal_ok = True

        self.sink.write_message("6. Account specific operations")
        fee_charged = checking.charge_maintenance_fee()
        if fee_charged:
            self.sink.write_message(f"Maintenance fee charged: {checking.MAINTENANCE_FEE:.2f}")
        else:
            self.sink.write_message("Insufficient balance to charge the maintenance fee")
        interest = savings.apply_interest()
        self.sink.write_message(f"Interest applied: {interest:.2f}")

        self.sink.write_message(
            "7. Final statements (polymorphism: the same statement() call on every account)"
        )
        self._write_statements(bank)

        self.sink.close()
        logger.info(
            "Demo finished: checking=%s savings=%s", checking.balance, savings.balance
        )
        return DemoResult(
            bank=bank,
            checking=checking,
            savings=savings,
            transfer_ok=transfer_ok,
            withdrawal_ok=withdrawal_ok,
            fee_charged=fee_charged,
            interest=interest,
        )

    def _write_statements(self, bank: Bank) -> None:
        # Each variant contributes its own details: fee for checking, rate for savings
        for account in bank:
            self.sink.write_statement(account.statement())
