"""Per-action wrappers over the Nano RPC decoders, grouped by topic."""

from . import accounts, blocks, node, wallets

__all__ = ["accounts", "blocks", "node", "wallets"]
