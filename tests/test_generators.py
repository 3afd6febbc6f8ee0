"""Tests for data generators."""

import random
import re

import pytest

from bank_demo.generators import ClientGenerator, generate_cpf, is_valid_cpf
from bank_demo.models import Client

CPF_FORMAT = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")


class TestCpf:
    """Tests for CPF generation and validation."""

    def test_generated_cpf_format(self) -> None:
        assert CPF_FORMAT.match(generate_cpf())

    def test_generated_cpfs_are_valid(self) -> None:
        rng = random.Random(7)
        for _ in range(200):
            assert is_valid_cpf(generate_cpf(rng))

    def test_seeded_generation_is_reproducible(self) -> None:
        assert generate_cpf(random.Random(1)) == generate_cpf(random.Random(1))

    @pytest.mark.parametrize("value", ["529.982.247-25", "52998224725", "111.444.777-35"])
    def test_known_valid(self, value: str) -> None:
        assert is_valid_cpf(value)

    @pytest.mark.parametrize(
        "value",
        [
            "529.982.247-26",  # wrong second digit
            "529.982.247-15",  # wrong first digit
            "123.456.789-00",
            "111.111.111-11",  # repeated digits
            "1234567890",
            "",
        ],
    )
    def test_known_invalid(self, value: str) -> None:
        assert not is_valid_cpf(value)


class TestClientGenerator:
    """Tests for ClientGenerator."""

    def test_generate_client(self, seed: int) -> None:
        client = ClientGenerator(seed=seed).generate()

        assert isinstance(client, Client)
        assert client.name
        assert client.phone
        assert CPF_FORMAT.match(client.national_id)
        assert is_valid_cpf(client.national_id)

    def test_generate_batch(self, seed: int) -> None:
        clients = list(ClientGenerator(seed=seed).generate_batch(5))

        assert len(clients) == 5
        assert len({c.national_id for c in clients}) == 5

    def test_seed_reproducibility(self, seed: int) -> None:
        first = list(ClientGenerator(seed=seed).generate_batch(3))
        second = list(ClientGenerator(seed=seed).generate_batch(3))

        assert first == second

    def test_other_locale(self, seed: int) -> None:
        client = ClientGenerator(seed=seed, locale="en_US").generate()

        assert client.name
        assert is_valid_cpf(client.national_id)
