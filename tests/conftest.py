"""Pytest configuration and fixtures."""

import os

import pytest

from app.core.schemas_ecosystem import Ecosystem


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["MIGRATION_ENGINE_ENV"] = "test"


@pytest.fixture
def make_ecosystem():
    """Factory for ecosystems; defaults describe a well-rated EVM L1."""

    def _make(**overrides) -> Ecosystem:
        data = {
            "id": "evm-chain",
            "name": "EVM Chain",
            "short": "EVM",
            "languages": ["Solidity"],
            "vm": "EVM",
            "transaction_model": "account",
            "evm_compatibility": "native",
            "deployment_options": ["contract"],
            "l2_maturity": 3,
            "tooling_maturity": 5,
            "doc_quality": 5,
            "ecosystem_funding": 5,
        }
        data.update(overrides)
        return Ecosystem(**data)

    return _make
