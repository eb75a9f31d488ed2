"""Minimal sanity checks against a running Nano node (read-only actions only)."""

from __future__ import annotations

import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from nano_rpc.actions import accounts, blocks, node  # noqa: E402
from nano_rpc.config import NanoConfig  # noqa: E402
from nano_rpc.logging_setup import configure_logging  # noqa: E402
from nano_rpc.metrics import default_metrics  # noqa: E402
from nano_rpc.node_api import NanoRpcClient  # noqa: E402
from nano_rpc.units import convert  # noqa: E402

# Override via env to inspect a specific account.
SAMPLE_ACCOUNT = os.getenv("NANO_SAMPLE_ACCOUNT")


def main() -> None:
    config = NanoConfig()
    configure_logging(config)
    with NanoRpcClient(config) as client:
        print("Version:", node.version(client=client))
        print("Block count:", blocks.block_count(client=client))
        print("Accounts in ledger:", node.frontier_count(client=client))
        supply = node.available_supply(client=client)
        print("Available supply (Mxrb):", convert(supply, "raw", "Mxrb"))

        if SAMPLE_ACCOUNT:
            balance, pending = accounts.account_balance(SAMPLE_ACCOUNT, client=client)
            print("Balance (Mxrb):", convert(balance, "raw", "Mxrb"))
            print("Pending (Mxrb):", convert(pending, "raw", "Mxrb"))
            print("Valid account:", accounts.validate_account_number(SAMPLE_ACCOUNT, client=client))

    print("Metrics:", default_metrics.snapshot())


if __name__ == "__main__":
    main()
