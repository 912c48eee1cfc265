"""Chain specifications and chain selection."""

from .spec import AccountSpec, EngineSpec, GenesisSpec, Seal, Specification, SpecParams
from .spec_type import DEFAULT_SPEC_TYPE, Chain, CustomChain, SpecType, parse_spec_type

__all__ = [
    "AccountSpec",
    "Chain",
    "CustomChain",
    "DEFAULT_SPEC_TYPE",
    "EngineSpec",
    "GenesisSpec",
    "Seal",
    "SpecParams",
    "SpecType",
    "Specification",
    "parse_spec_type",
]
