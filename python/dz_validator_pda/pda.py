"""Deposit PDA derivation for validator identities."""

import logging
from dataclasses import dataclass

from solders.pubkey import Pubkey  # type: ignore

from .config import DepositConfig
from .constants import MAX_BUMP, MAX_SEED_LEN, MAX_SEEDS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepositAddress:
    """A derived deposit PDA and the bump seed that moved it off the curve."""

    address: Pubkey
    bump: int

    def __str__(self) -> str:
        return str(self.address)


def create_program_address(seeds: list[bytes], program_id: Pubkey) -> Pubkey | None:
    """Address for one bump candidate. Returns None when it lands on the curve."""
    try:
        return Pubkey.create_program_address(seeds, program_id)
    except Exception:
        # solders raises PubkeyError for on-curve results; seeds are checked by the caller
        return None


def find_program_address(seeds: list[bytes], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Search bumps from 255 down to 0 for the first off-curve address.

    Raises:
        ConfigurationError: If a seed is too long, there are too many seeds,
            or no bump yields an off-curve address.
    """
    if len(seeds) + 1 > MAX_SEEDS:
        raise ConfigurationError(f"too many seeds: {len(seeds)} (max {MAX_SEEDS - 1})")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise ConfigurationError(f"seed exceeds {MAX_SEED_LEN} bytes: {len(seed)}")

    for bump in range(MAX_BUMP, -1, -1):
        address = create_program_address([*seeds, bytes([bump])], program_id)
        if address is not None:
            return address, bump

    raise ConfigurationError(
        f"no off-curve address found in {MAX_BUMP + 1} bumps for program {program_id}"
    )


class DepositAddressDeriver:
    """Derives validator deposit PDAs under a fixed program and seed label."""

    def __init__(self, config: DepositConfig | None = None):
        self._config = config or DepositConfig()

    @property
    def program_id(self) -> Pubkey:
        return self._config.program_id

    def seeds(self, identity: Pubkey) -> list[bytes]:
        return [self._config.seed_label, bytes(identity)]

    def derive(self, identity: Pubkey) -> DepositAddress:
        address, bump = find_program_address(self.seeds(identity), self._config.program_id)
        logger.debug("Derived deposit PDA %s (bump %d) for %s", address, bump, identity)
        return DepositAddress(address=address, bump=bump)


def derive_deposit_address(identity: Pubkey, config: DepositConfig | None = None) -> Pubkey:
    """Derive the deposit PDA for a validator identity."""
    return DepositAddressDeriver(config).derive(identity).address
