"""Client generator."""

from __future__ import annotations

import random
import re
from typing import Iterator

from bank_demo.generators.base import BaseGenerator
from bank_demo.models import Client

_CPF_DIGITS = re.compile(r"\D")


def _check_digit(digits: list[int]) -> int:
    weight = len(digits) + 1
    total = sum(d * w for d, w in zip(digits, range(weight, 1, -1)))
    d = 11 - (total % 11)
    return 0 if d >= 10 else d


def generate_cpf(rng: random.Random | None = None) -> str:
    """Generate a valid Brazilian CPF formatted as ``XXX.XXX.XXX-XX``."""
    rng = rng or random.Random()
    digits = [rng.randint(0, 9) for _ in range(9)]
    digits.append(_check_digit(digits))
    digits.append(_check_digit(digits))
    raw = "".join(str(d) for d in digits)
    return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"


def is_valid_cpf(value: str) -> bool:
    """Check a CPF's length and both check digits. Formatting is ignored."""
    raw = _CPF_DIGITS.sub("", value)
    if len(raw) != 11 or raw == raw[0] * 11:
        return False
    digits = [int(c) for c in raw]
    return digits[9] == _check_digit(digits[:9]) and digits[10] == _check_digit(digits[:10])


class ClientGenerator(BaseGenerator):
    """Generate synthetic bank clients."""

    def generate(self) -> Client:
        """Generate a single client.

        Returns
        -------
        Client
            Client with a Faker name and phone and a valid CPF.
        """
        return Client(
            name=self.fake.name(),
            national_id=generate_cpf(self.rng),
            phone=self.fake.phone_number(),
        )

    def generate_batch(self, count: int) -> Iterator[Client]:
        """Generate multiple clients.

        Parameters
        ----------
        count : int
            Number of clients to generate.

        Yields
        ------
        Client
            Generated clients.
        """
        for _ in range(count):
            yield self.generate()
