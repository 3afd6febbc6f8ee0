"""Tests for console sink and serialization helpers."""

import io
import json
from decimal import Decimal

import pytest

from bank_demo.exceptions import ConfigurationError
from bank_demo.models import AccountKind, CheckingAccount, Client, SavingsAccount
from bank_demo.sinks import ConsoleSink
from bank_demo.sinks.serialization import serialize_value, to_dict
from bank_demo.store import Bank


class TestSerialization:
    """Tests for serialization helpers."""

    def test_serialize_decimal(self) -> None:
        assert serialize_value(Decimal("788.00")) == "788.00"

    def test_serialize_enum(self) -> None:
        assert serialize_value(AccountKind.SAVINGS) == "SAVINGS"

    def test_serialize_nested(self) -> None:
        value = {"amounts": (Decimal("1.50"), 2), "kind": AccountKind.CHECKING}
        assert serialize_value(value) == {"amounts": ["1.50", 2], "kind": "CHECKING"}

    def test_to_dict_dataclass(self, client_a: Client) -> None:
        assert to_dict(client_a) == {
            "name": "João Silva",
            "national_id": "123.456.789-00",
            "phone": "(11) 99999-9999",
        }

    def test_to_dict_statement(self, checking: CheckingAccount) -> None:
        checking.deposit(Decimal("1000.00"))

        data = to_dict(checking.statement())

        assert data == {
            "kind": "CHECKING",
            "owner_name": "João Silva",
            "branch_code": 1,
            "account_number": checking.number,
            "balance": "1000.00",
            "details": {"Maintenance fee": "12.00"},
        }

    def test_to_dict_plain_value(self) -> None:
        assert to_dict(42) == {"value": "42"}


class TestConsoleSinkText:
    """Tests for ConsoleSink in text mode."""

    def test_write_message(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream=stream).write_message("1. Initial deposits")
        assert stream.getvalue() == "1. Initial deposits\n"

    def test_write_statement(self, savings: SavingsAccount) -> None:
        stream = io.StringIO()
        savings.deposit(Decimal("500.00"))

        ConsoleSink(stream=stream).write_statement(savings.statement())

        output = stream.getvalue()
        assert "=== Savings Account Statement ===" in output
        assert "Holder: Maria Santos" in output
        assert "Balance: 500.00" in output
        assert "Monthly interest: 0.5%" in output

    def test_write_accounts(
        self, bank: Bank, checking: CheckingAccount, savings: SavingsAccount
    ) -> None:
        stream = io.StringIO()

        ConsoleSink(stream=stream).write_accounts(bank.name, bank.list_accounts())

        lines = stream.getvalue().splitlines()
        assert lines[0] == "=== Accounts of Banco Digital ==="
        assert lines[1] == "Checking account - Branch: 1, Number: 1, Holder: João Silva"
        assert lines[2] == "Savings account - Branch: 1, Number: 2, Holder: Maria Santos"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().write_message("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_close_prints_counts(self, checking: CheckingAccount) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)
        sink.write_message("a")
        sink.write_message("b")
        sink.write_statement(checking.statement())

        sink.close()

        output = stream.getvalue()
        assert "Console Sink Summary" in output
        assert "  messages: 2" in output
        assert "  statements: 1" in output

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ConsoleSink(format="csv")


class TestConsoleSinkJson:
    """Tests for ConsoleSink in JSON mode."""

    def _records(self, stream: io.StringIO) -> list[dict]:
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    def test_write_statement_json(self, checking: CheckingAccount) -> None:
        stream = io.StringIO()

        ConsoleSink(format="json", stream=stream).write_statement(checking.statement())

        (record,) = self._records(stream)
        assert record["type"] == "statement"
        assert record["kind"] == "CHECKING"
        assert record["balance"] == "0.00"

    def test_write_accounts_json(
        self, bank: Bank, checking: CheckingAccount, savings: SavingsAccount
    ) -> None:
        stream = io.StringIO()

        ConsoleSink(format="json", stream=stream).write_accounts(bank.name, bank.list_accounts())

        (record,) = self._records(stream)
        assert record["bank"] == "Banco Digital"
        assert record["accounts"] == [
            {"kind": "CHECKING", "branch_code": 1, "account_number": 1, "owner_name": "João Silva"},
            {"kind": "SAVINGS", "branch_code": 1, "account_number": 2, "owner_name": "Maria Santos"},
        ]

    def test_message_and_summary_json(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(format="json", stream=stream)

        sink.write_message("hi")
        sink.close()

        assert self._records(stream) == [
            {"type": "message", "message": "hi"},
            {"type": "summary", "counts": {"messages": 1}},
        ]

    def test_pretty_json_is_indented(self) -> None:
        stream = io.StringIO()

        ConsoleSink(format="json", pretty=True, stream=stream).write_message("hi")

        assert json.loads(stream.getvalue()) == {"type": "message", "message": "hi"}
        assert "\n  " in stream.getvalue()

    def test_non_ascii_preserved(self, client_a: Client) -> None:
        stream = io.StringIO()
        account = CheckingAccount(client_a, number=1)

        ConsoleSink(format="json", stream=stream).write_statement(account.statement())

        assert "João Silva" in stream.getvalue()
