"""
Startup parameter bundle.

Node startup resolves every selector exactly once, before any subsystem
runs. The order matters only in one place: the fat database guard is
given the resolved pruning algorithm, so pruning is resolved first::

    ParamsRequest + PersistedDefaults
        |
        +-- spec_type.spec()            --> Specification
        +-- to_algorithm()              --> Algorithm
        +-- tracing_switch_to_bool()    --> tracing
        +-- fatdb_switch_to_bool()      --> fat_db
        +-- mode_switch_to_mode()       --> Mode
        +-- to_gas_pricer()             --> GasPricer
        |
    NodeParams
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from node_params.subspecs.accounts import AccountsConfig
from node_params.subspecs.client import DarkMode, Mode, PassiveMode
from node_params.subspecs.ethspec import DEFAULT_SPEC_TYPE, Specification, SpecType
from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.miner import (
    GasPricer,
    GasPricerConfig,
    MinerExtras,
    ResealPolicy,
    default_gas_pricer_config,
    initial_min,
    to_gas_pricer,
)
from node_params.subspecs.params import (
    DEFAULT_PRUNING,
    Pruning,
    Switch,
    fatdb_switch_to_bool,
    mode_switch_to_mode,
    to_algorithm,
    tracing_switch_to_bool,
)
from node_params.subspecs.storage import PersistedDefaults, UserDefaults
from node_params.types import Uint256

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParamsRequest:
    """Everything the operator asked for, already parsed but not yet resolved."""

    spec_type: SpecType = DEFAULT_SPEC_TYPE
    pruning: Pruning = DEFAULT_PRUNING
    tracing: Switch = Switch.AUTO
    fat_db: Switch = Switch.AUTO
    mode: Mode | None = None
    reseal: ResealPolicy = field(default_factory=ResealPolicy)
    accounts: AccountsConfig = field(default_factory=AccountsConfig)
    miner_extras: MinerExtras = field(default_factory=MinerExtras)
    gas_pricer: GasPricerConfig = field(default_factory=default_gas_pricer_config)


@dataclass(frozen=True, slots=True)
class NodeParams:
    """Fully resolved parameters handed to node startup."""

    spec: Specification
    pruning: Algorithm
    tracing: bool
    fat_db: bool
    mode: Mode
    legacy_fork_name: str | None
    reseal: ResealPolicy
    accounts: AccountsConfig
    miner_extras: MinerExtras
    gas_pricer: GasPricer
    initial_min_gas_price: Uint256

    def to_user_defaults(self) -> UserDefaults:
        """Record to persist once the node has started with these parameters."""
        return UserDefaults(
            is_first_launch=False,
            pruning=self.pruning,
            tracing=self.tracing,
            fat_db=self.fat_db,
            mode=self.mode,
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible summary, for display."""
        mode: dict[str, Any] = {"name": str(self.mode)}
        match self.mode:
            case PassiveMode(timeout=timeout, alarm=alarm):
                mode["timeout"] = int(timeout.total_seconds())
                mode["alarm"] = int(alarm.total_seconds())
            case DarkMode(timeout=timeout):
                mode["timeout"] = int(timeout.total_seconds())
        return {
            "chain": self.spec.name,
            "network_id": int(self.spec.params.network_id),
            "legacy_fork_name": self.legacy_fork_name,
            "pruning": str(self.pruning),
            "tracing": self.tracing,
            "fat_db": self.fat_db,
            "mode": mode,
            "reseal": {"own": self.reseal.own, "external": self.reseal.external},
            "accounts": self.accounts.model_dump(mode="json"),
            "miner_extras": self.miner_extras.model_dump(mode="json"),
            "gas_pricer": self.gas_pricer.model_dump(mode="json"),
            "initial_min_gas_price": int(self.initial_min_gas_price),
        }


def resolve_node_params(request: ParamsRequest, user_defaults: PersistedDefaults) -> NodeParams:
    """
    Resolve a request against the persisted defaults.

    Raises:
        SpecLoadError: If a custom specification cannot be loaded.
        ResyncRequiredError: If tracing or the fat database is switched on
            for an existing database that was synced without it.
    """
    spec = request.spec_type.spec()
    algorithm = to_algorithm(request.pruning, user_defaults)
    tracing = tracing_switch_to_bool(request.tracing, user_defaults)
    fat_db = fatdb_switch_to_bool(request.fat_db, user_defaults, algorithm)
    mode = mode_switch_to_mode(request.mode, user_defaults)

    if not algorithm.is_stable():
        logger.warning("Pruning algorithm %s is experimental", algorithm)

    params = NodeParams(
        spec=spec,
        pruning=algorithm,
        tracing=tracing,
        fat_db=fat_db,
        mode=mode,
        legacy_fork_name=request.spec_type.legacy_fork_name(),
        reseal=request.reseal,
        accounts=request.accounts,
        miner_extras=request.miner_extras,
        gas_pricer=to_gas_pricer(request.gas_pricer),
        initial_min_gas_price=initial_min(request.gas_pricer),
    )
    logger.info(
        "Resolved parameters: chain=%s pruning=%s tracing=%s fat_db=%s mode=%s",
        spec.name,
        algorithm,
        tracing,
        fat_db,
        mode,
    )
    return params
