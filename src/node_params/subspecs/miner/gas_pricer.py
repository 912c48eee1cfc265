"""
Gas price configuration.

Two layers live here. The configuration layer is what the operator asks
for; the runtime layer is what the miner actually consumes::

    FixedGasPricerConfig(price) ----------------------> FixedGasPricer(price)
    CalibratedGasPricerConfig(initial_minimum,
                              usd_per_tx,
                              recalibration_period) --> CalibratedGasPricer(
                                                            GasPriceCalibratorOptions(
                                                                usd_per_tx,
                                                                recalibration_period))

`initial_minimum` does not reach the calibrator. It is the price the miner
starts from until the first calibration lands, read via `initial_min`.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final, TypeAlias

from node_params.types import StrictBaseModel, Uint256

DEFAULT_INITIAL_MINIMUM: Final = Uint256(11_904_761_856)
"""Starting minimum gas price, in wei."""

DEFAULT_USD_PER_TX: Final = 0.0025
"""Target cost of a basic transfer, in US dollars."""

DEFAULT_RECALIBRATION_PERIOD: Final = timedelta(seconds=3600)
"""How often the calibrated price is recomputed."""


class FixedGasPricerConfig(StrictBaseModel):
    """Always use this minimum gas price."""

    price: Uint256


class CalibratedGasPricerConfig(StrictBaseModel):
    """Track a fiat cost per transaction, starting from `initial_minimum`."""

    initial_minimum: Uint256 = DEFAULT_INITIAL_MINIMUM
    usd_per_tx: float = DEFAULT_USD_PER_TX
    recalibration_period: timedelta = DEFAULT_RECALIBRATION_PERIOD


GasPricerConfig: TypeAlias = FixedGasPricerConfig | CalibratedGasPricerConfig
"""Union of gas pricer configurations for pattern matching dispatch."""


def default_gas_pricer_config() -> GasPricerConfig:
    """Calibrated pricing with the stock targets."""
    return CalibratedGasPricerConfig()


def initial_min(config: GasPricerConfig) -> Uint256:
    """Lower bound on the gas price before any calibration has run."""
    match config:
        case FixedGasPricerConfig(price=price):
            return price
        case CalibratedGasPricerConfig(initial_minimum=initial_minimum):
            return initial_minimum
    raise TypeError(f"Unknown gas pricer config: {config!r}")


class GasPriceCalibratorOptions(StrictBaseModel):
    """What the calibrator aims for and how often it re-evaluates."""

    usd_per_tx: float
    recalibration_period: timedelta


class FixedGasPricer(StrictBaseModel):
    """Runtime pricer with a constant price."""

    price: Uint256


class CalibratedGasPricer(StrictBaseModel):
    """Runtime pricer driven by a fiat-price calibrator."""

    options: GasPriceCalibratorOptions


GasPricer: TypeAlias = FixedGasPricer | CalibratedGasPricer
"""Union of runtime gas pricers."""


def to_gas_pricer(config: GasPricerConfig) -> GasPricer:
    """Convert configuration into the runtime pricer the miner consumes."""
    match config:
        case FixedGasPricerConfig(price=price):
            return FixedGasPricer(price=price)
        case CalibratedGasPricerConfig(
            usd_per_tx=usd_per_tx, recalibration_period=recalibration_period
        ):
            return CalibratedGasPricer(
                options=GasPriceCalibratorOptions(
                    usd_per_tx=usd_per_tx, recalibration_period=recalibration_period
                )
            )
    raise TypeError(f"Unknown gas pricer config: {config!r}")
