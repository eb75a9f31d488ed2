"""
Client library for the Nano node RPC.

The package decodes the node's loosely typed JSON responses into typed values
and converts balances between denominations without ever using floats. See
DESIGN.md for full details.
"""

from nano_rpc.config import NanoConfig, default_config
from nano_rpc.node_api import NanoRpcClient, default_client
from nano_rpc.units import convert

__all__ = ["NanoConfig", "NanoRpcClient", "convert", "default_client", "default_config"]
