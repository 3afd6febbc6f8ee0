"""Configuration management for bank-demo."""

import os
from dataclasses import dataclass, field
from decimal import Decimal

from bank_demo.exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "json")


@dataclass
class OutputConfig:
    """Console output configuration."""

    format: str = "text"
    pretty_json: bool = False

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.format!r}, expected one of {OUTPUT_FORMATS}"
            )


@dataclass
class DemoConfig:
    """Amounts and client source for the demonstration run."""

    generate_clients: bool = False
    locale: str = "pt_BR"
    seed: int | None = None
    initial_checking_deposit: Decimal = Decimal("1000.00")
    initial_savings_deposit: Decimal = Decimal("500.00")
    transfer_amount: Decimal = Decimal("200.00")
    savings_withdrawal: Decimal = Decimal("100.00")


@dataclass
class BankConfig:
    """Main configuration for bank-demo."""

    bank_name: str = "Banco Digital"
    branch_code: int = 1
    first_account_number: int = 1
    log_level: str = "INFO"
    log_format: str = "standard"
    output: OutputConfig = field(default_factory=OutputConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            format=os.getenv("OUTPUT_FORMAT", "text").lower(),
            pretty_json=_env_flag("PRETTY_JSON"),
        )

        seed = os.getenv("SEED")
        demo = DemoConfig(
            generate_clients=_env_flag("DEMO_GENERATE_CLIENTS"),
            locale=os.getenv("DEMO_LOCALE", "pt_BR"),
            seed=_parse_int("SEED", seed) if seed else None,
        )

        return cls(
            bank_name=os.getenv("BANK_NAME", "Banco Digital"),
            branch_code=_parse_int("BANK_BRANCH_CODE", os.getenv("BANK_BRANCH_CODE", "1")),
            first_account_number=_parse_int(
                "BANK_FIRST_ACCOUNT_NUMBER", os.getenv("BANK_FIRST_ACCOUNT_NUMBER", "1")
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            output=output,
            demo=demo,
        )


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
