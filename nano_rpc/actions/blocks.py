"""Block actions."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from nano_rpc.node_api import NanoRpcClient, default_client


def get_block(hash: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Return the JSON representation of a block."""
    return client.fetch_map("block", {"hash": hash}, key="contents")


def get_blocks(
    hashes: Sequence[str], *, client: NanoRpcClient = default_client
) -> Dict[str, Dict[str, str]]:
    return client.fetch_map_of_maps("blocks", {"hashes": list(hashes)}, key="blocks")


def blocks_info(
    hashes: Sequence[str],
    *,
    pending: bool = False,
    source: bool = False,
    client: NanoRpcClient = default_client,
) -> Dict[str, Any]:
    """
    Return blocks with their amount and account.

    ``pending`` also reports whether each block is pending; ``source`` adds
    the source account of receive and open blocks.
    """
    payload = {"hashes": list(hashes), "pending": pending, "source": source}
    return client.fetch_map_interface("blocks_info", payload, key="blocks")


def block_account(hash: str, *, client: NanoRpcClient = default_client) -> str:
    """Return the account containing a block."""
    return client.fetch_string("block_account", {"hash": hash}, key="account")


def block_count(*, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Number of blocks in the ledger and of unchecked synchronizing blocks."""
    return client.fetch_map("block_count")


def block_count_type(*, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Number of blocks in the ledger by type."""
    return client.fetch_map("block_count_type")


def _create_block(
    block_type: str, fields: Dict[str, Any], work: str, client: NanoRpcClient
) -> Dict[str, str]:
    payload: Dict[str, Any] = {"type": block_type, **fields}
    if work:
        payload["work"] = work
    return client.fetch_map("block_create", payload)


def create_open_block(
    key: str,
    account: str,
    representative: str,
    source: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> Dict[str, str]:
    """Create an open block signed with ``key``. Requires enable_control."""
    fields = {
        "key": key,
        "account": account,
        "representative": representative,
        "source": source,
    }
    return _create_block("open", fields, work, client)


def create_receive_block(
    wallet: str,
    account: str,
    source: str,
    previous: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> Dict[str, str]:
    fields = {"wallet": wallet, "account": account, "source": source, "previous": previous}
    return _create_block("receive", fields, work, client)


def create_send_block(
    wallet: str,
    account: str,
    destination: str,
    balance: str,
    amount: str,
    previous: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> Dict[str, str]:
    """Create a send block; ``balance`` and ``amount`` are raw decimal strings."""
    fields = {
        "wallet": wallet,
        "account": account,
        "destination": destination,
        "balance": balance,
        "amount": amount,
        "previous": previous,
    }
    return _create_block("send", fields, work, client)


def create_change_block(
    wallet: str,
    account: str,
    representative: str,
    previous: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> Dict[str, str]:
    fields = {
        "wallet": wallet,
        "account": account,
        "representative": representative,
        "previous": previous,
    }
    return _create_block("change", fields, work, client)


def process_block(block: Mapping[str, str], *, client: NanoRpcClient = default_client) -> str:
    """Publish a block to the network and return its hash."""
    return client.fetch_string("process", {"block": dict(block)}, key="hash")


def pending_exists(hash: str, *, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("pending_exists", {"hash": hash}, key="exists")


def get_unchecked_block(hash: str, *, client: NanoRpcClient = default_client) -> str:
    """Return the JSON text of an unchecked synchronizing block."""
    return client.fetch_string("unchecked_get", {"hash": hash}, key="contents")


def cancel_work(hash: str, *, client: NanoRpcClient = default_client) -> None:
    """Stop generating work for a block. Requires enable_control."""
    client.execute("work_cancel", {"hash": hash})


def generate_work(hash: str, *, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string("work_generate", {"hash": hash}, key="work")


def validate_work(work: str, hash: str, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"work": work, "hash": hash}
    return client.is_success("work_validate", payload, key="valid")


def successors(block: str, count: int, *, client: NanoRpcClient = default_client) -> List[str]:
    """Block hashes in the account chain starting at ``block``, going forward."""
    payload = {"block": block, "count": count}
    return client.fetch_list("successors", payload, key="blocks")


def chain(block: str, count: int, *, client: NanoRpcClient = default_client) -> List[str]:
    """Block hashes in the account chain ending at ``block``, going backward."""
    payload = {"block": block, "count": count}
    return client.fetch_list("chain", payload, key="blocks")


def history(
    hash: str, count: int, *, client: NanoRpcClient = default_client
) -> List[Dict[str, str]]:
    """Report send/receive entries for a chain of blocks."""
    payload = {"hash": hash, "count": count}
    return client.fetch_records("history", payload, key="history")
