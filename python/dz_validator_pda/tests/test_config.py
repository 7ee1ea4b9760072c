"""Tests for DepositConfig."""

import dataclasses

import pytest
from solders.pubkey import Pubkey  # type: ignore

from dz_validator_pda.config import DepositConfig
from dz_validator_pda.constants import (
    DEFAULT_RPC_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEVNET_RPC_URL,
    ENV_PROGRAM_ID,
    ENV_REGISTRY_URL,
    ENV_RPC_URL,
    ENV_TIMEOUT_SECONDS,
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SEED_SOLANA_VALIDATOR_DEPOSIT,
)
from dz_validator_pda.errors import ConfigurationError

ALL_ENV = [ENV_RPC_URL, ENV_REGISTRY_URL, ENV_TIMEOUT_SECONDS, ENV_PROGRAM_ID]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ALL_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDepositConfig:
    def test_defaults(self):
        config = DepositConfig()
        assert config.program_id == REVENUE_DISTRIBUTION_PROGRAM_ID
        assert config.seed_label == SEED_SOLANA_VALIDATOR_DEPOSIT
        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS

    def test_registry_falls_back_to_rpc(self):
        config = DepositConfig(rpc_url=DEVNET_RPC_URL)
        assert config.effective_registry_url == DEVNET_RPC_URL

    def test_registry_override(self):
        config = DepositConfig(registry_url="https://gossip.example")
        assert config.effective_registry_url == "https://gossip.example"

    def test_immutable(self):
        config = DepositConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.rpc_url = DEVNET_RPC_URL  # type: ignore[misc]

    @pytest.mark.parametrize("timeout", [0, -1.0, float("nan"), float("inf")])
    def test_non_positive_timeout(self, timeout):
        with pytest.raises(ConfigurationError, match="timeout must be positive"):
            DepositConfig(timeout_seconds=timeout)

    def test_empty_rpc_url(self):
        with pytest.raises(ConfigurationError, match="RPC URL cannot be empty"):
            DepositConfig(rpc_url="")

    def test_with_overrides(self):
        config = DepositConfig().with_overrides(rpc_url=DEVNET_RPC_URL, timeout_seconds=5)
        assert config.rpc_url == DEVNET_RPC_URL
        assert config.timeout_seconds == 5
        assert config.registry_url is None

    def test_with_overrides_ignores_empty_values(self):
        config = DepositConfig()
        assert config.with_overrides(rpc_url=None, registry_url="") is config


class TestFromEnv:
    def test_no_env(self, clean_env):
        assert DepositConfig.from_env() == DepositConfig()

    def test_reads_env(self, clean_env):
        clean_env.setenv(ENV_RPC_URL, DEVNET_RPC_URL)
        clean_env.setenv(ENV_REGISTRY_URL, "https://gossip.example")
        clean_env.setenv(ENV_TIMEOUT_SECONDS, "7.5")
        clean_env.setenv(ENV_PROGRAM_ID, "11111111111111111111111111111112")

        config = DepositConfig.from_env()

        assert config.rpc_url == DEVNET_RPC_URL
        assert config.registry_url == "https://gossip.example"
        assert config.timeout_seconds == 7.5
        assert config.program_id == Pubkey.from_string("11111111111111111111111111111112")

    def test_bad_timeout(self, clean_env):
        clean_env.setenv(ENV_TIMEOUT_SECONDS, "soon")
        with pytest.raises(ConfigurationError, match=ENV_TIMEOUT_SECONDS):
            DepositConfig.from_env()

    def test_bad_program_id(self, clean_env):
        clean_env.setenv(ENV_PROGRAM_ID, "invalid_address")
        with pytest.raises(ConfigurationError, match=ENV_PROGRAM_ID):
            DepositConfig.from_env()
