"""Runtime configuration for deposit account components."""

import math
import os
from dataclasses import dataclass, replace

from solders.pubkey import Pubkey  # type: ignore

from .constants import (
    DEFAULT_RPC_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_PROGRAM_ID,
    ENV_REGISTRY_URL,
    ENV_RPC_URL,
    ENV_TIMEOUT_SECONDS,
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SEED_SOLANA_VALIDATOR_DEPOSIT,
)
from .errors import ConfigurationError
from .identity import parse_identity


@dataclass(frozen=True)
class DepositConfig:
    """Immutable settings shared by the deriver, oracle, reader and submitter.

    Attributes:
        program_id: Program namespace the deposit PDAs are derived under.
        seed_label: Seed that separates deposit PDAs from other account classes.
        rpc_url: Endpoint used for balance reads and transfer submission.
        registry_url: Endpoint queried for gossip membership. Falls back to rpc_url.
        timeout_seconds: Upper bound for every network call.
    """

    program_id: Pubkey = REVENUE_DISTRIBUTION_PROGRAM_ID
    seed_label: bytes = SEED_SOLANA_VALIDATOR_DEPOSIT
    rpc_url: str = DEFAULT_RPC_URL
    registry_url: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout must be positive and finite, got {self.timeout_seconds}")
        if not self.rpc_url:
            raise ConfigurationError("RPC URL cannot be empty")

    @property
    def effective_registry_url(self) -> str:
        return self.registry_url or self.rpc_url

    def with_overrides(
        self,
        rpc_url: str | None = None,
        registry_url: str | None = None,
        timeout_seconds: float | None = None,
    ) -> "DepositConfig":
        """Return a copy with the given non-empty values replaced."""
        changes: dict = {}
        if rpc_url:
            changes["rpc_url"] = rpc_url
        if registry_url:
            changes["registry_url"] = registry_url
        if timeout_seconds is not None:
            changes["timeout_seconds"] = timeout_seconds
        return replace(self, **changes) if changes else self

    @classmethod
    def from_env(cls) -> "DepositConfig":
        """Build a config from DZ_PDA_* environment variables.

        Raises:
            ConfigurationError: If a variable holds an unparseable value.
        """
        kwargs: dict = {}

        rpc_url = os.getenv(ENV_RPC_URL, "")
        if rpc_url:
            kwargs["rpc_url"] = rpc_url

        registry_url = os.getenv(ENV_REGISTRY_URL, "")
        if registry_url:
            kwargs["registry_url"] = registry_url

        timeout = os.getenv(ENV_TIMEOUT_SECONDS, "")
        if timeout:
            try:
                kwargs["timeout_seconds"] = float(timeout)
            except ValueError:
                raise ConfigurationError(f"{ENV_TIMEOUT_SECONDS} is not a number: {timeout!r}")

        program_id = os.getenv(ENV_PROGRAM_ID, "")
        if program_id:
            try:
                kwargs["program_id"] = parse_identity(program_id)
            except ValueError:
                raise ConfigurationError(f"{ENV_PROGRAM_ID} is not a valid pubkey: {program_id!r}")

        return cls(**kwargs)
