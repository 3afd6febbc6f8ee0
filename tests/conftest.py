"""Pytest configuration and fixtures."""

import pytest

from bank_demo.models import CheckingAccount, Client, SavingsAccount
from bank_demo.numbering import AccountNumberSequence
from bank_demo.store import Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def client_a() -> Client:
    """First sample client."""
    return Client(name="João Silva", national_id="123.456.789-00", phone="(11) 99999-9999")


@pytest.fixture
def client_b() -> Client:
    """Second sample client."""
    return Client(name="Maria Santos", national_id="987.654.321-00", phone="(11) 88888-8888")


@pytest.fixture
def bank() -> Bank:
    """Fresh bank with numbering starting at 1."""
    return Bank("Banco Digital", numbers=AccountNumberSequence(1))


@pytest.fixture
def checking(bank: Bank, client_a: Client) -> CheckingAccount:
    """Checking account registered with ``bank``, zero balance."""
    return bank.open_checking(client_a)


@pytest.fixture
def savings(bank: Bank, client_b: Client) -> SavingsAccount:
    """Savings account registered with ``bank``, zero balance."""
    return bank.open_savings(client_b)
