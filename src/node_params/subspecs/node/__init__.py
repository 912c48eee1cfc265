"""Startup parameter bundle."""

from .params import NodeParams, ParamsRequest, resolve_node_params

__all__ = ["NodeParams", "ParamsRequest", "resolve_node_params"]
