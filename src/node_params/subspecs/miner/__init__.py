"""Miner-facing configuration: reseal policy, gas pricing and block authoring."""

from .extras import MinerExtras
from .gas_pricer import (
    DEFAULT_INITIAL_MINIMUM,
    DEFAULT_RECALIBRATION_PERIOD,
    DEFAULT_USD_PER_TX,
    CalibratedGasPricer,
    CalibratedGasPricerConfig,
    FixedGasPricer,
    FixedGasPricerConfig,
    GasPriceCalibratorOptions,
    GasPricer,
    GasPricerConfig,
    default_gas_pricer_config,
    initial_min,
    to_gas_pricer,
)
from .reseal import ResealPolicy

__all__ = [
    "CalibratedGasPricer",
    "CalibratedGasPricerConfig",
    "DEFAULT_INITIAL_MINIMUM",
    "DEFAULT_RECALIBRATION_PERIOD",
    "DEFAULT_USD_PER_TX",
    "FixedGasPricer",
    "FixedGasPricerConfig",
    "GasPriceCalibratorOptions",
    "GasPricer",
    "GasPricerConfig",
    "MinerExtras",
    "ResealPolicy",
    "default_gas_pricer_config",
    "initial_min",
    "to_gas_pricer",
]
