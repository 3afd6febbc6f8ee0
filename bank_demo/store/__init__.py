"""In-memory registries for banking entities."""

from bank_demo.store.bank import Bank

__all__ = ["Bank"]
