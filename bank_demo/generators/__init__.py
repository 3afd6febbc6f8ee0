"""Synthetic data generators."""

from bank_demo.generators.client import ClientGenerator, generate_cpf, is_valid_cpf

__all__ = ["ClientGenerator", "generate_cpf", "is_valid_cpf"]
