"""Node, ledger and key actions."""

from __future__ import annotations

from typing import Any, Dict, List

from nano_rpc.node_api import NanoRpcClient, default_client


def available_supply(*, client: NanoRpcClient = default_client) -> str:
    """Return how much of the supply is public, in raw."""
    return client.fetch_string("available_supply", key="available")


def frontier_count(*, client: NanoRpcClient = default_client) -> int:
    """Report the number of accounts in the ledger."""
    return client.fetch_int("frontier_count", key="count")


def representatives(
    count: int = 0, sorting: bool = False, *, client: NanoRpcClient = default_client
) -> Dict[str, str]:
    """Map representatives to their voting weight, optionally limited and sorted."""
    payload: Dict[str, Any] = {"sorting": sorting}
    if count > 0:
        payload["count"] = count
    return client.fetch_map("representatives", payload, key="representatives")


def ledger(
    account: str,
    count: int,
    *,
    representative: bool = False,
    weight: bool = False,
    pending: bool = False,
    sorting: bool = False,
    client: NanoRpcClient = default_client,
) -> Dict[str, Dict[str, str]]:
    """
    Return frontier, open block, representative block, balance, modified
    timestamp and block count for accounts starting at ``account``.

    Requires enable_control.
    """
    payload = {
        "account": account,
        "count": count,
        "representative": representative,
        "weight": weight,
        "pending": pending,
        "sorting": sorting,
    }
    return client.fetch_map_of_maps("ledger", payload, key="accounts")


def get_receive_minimum(*, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string("receive_minimum", key="amount")


def set_receive_minimum(amount: str, *, client: NanoRpcClient = default_client) -> bool:
    """Set the receive minimum until the node restarts. ``amount`` is in raw."""
    return client.is_success("receive_minimum_set", {"amount": amount})


def search_all_pending(*, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("search_pending_all")


def unchecked_blocks(count: int, *, client: NanoRpcClient = default_client) -> Dict[str, Dict[str, str]]:
    """Unchecked synchronizing block hashes mapped to their contents."""
    return client.fetch_map_of_maps("unchecked", {"count": count}, key="blocks")


def clear_unchecked_blocks(*, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("unchecked_clear")


def unchecked_keys(key: str, count: int, *, client: NanoRpcClient = default_client) -> Dict[str, Any]:
    """Unchecked database keys, hashes and contents starting at ``key``."""
    payload = {"key": key, "count": count}
    return client.fetch_map_interface("unchecked_keys", payload, key="unchecked")


def send_keepalive(address: str, port: int, *, client: NanoRpcClient = default_client) -> None:
    """Ask the node to send a keepalive packet to ``address:port``."""
    client.execute("keepalive", {"address": address, "port": port})


def peers(*, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Map peer addresses to their network protocol version."""
    return client.fetch_map("peers", key="peers")


def add_work_peer(address: str, port: int, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"address": address, "port": port}
    return client.is_success("work_peer_add", payload)


def get_work_peers(*, client: NanoRpcClient = default_client) -> List[str]:
    return client.fetch_list("work_peers", key="work_peers")


def clear_work_peers(*, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("work_peers_clear")


def bootstrap(address: str, port: int, *, client: NanoRpcClient = default_client) -> bool:
    """Start bootstrapping from a specific peer."""
    payload = {"address": address, "port": port}
    return client.is_success("bootstrap", payload)


def bootstrap_any(*, client: NanoRpcClient = default_client) -> bool:
    """Start a multi-connection bootstrap from random peers."""
    return client.is_success("bootstrap_any")


def republish(
    hash: str,
    count: int = 0,
    sources: int = 0,
    destinations: int = 0,
    *,
    client: NanoRpcClient = default_client,
) -> List[str]:
    """
    Rebroadcast blocks starting at ``hash``.

    ``sources`` and ``destinations`` additionally rebroadcast that many
    levels of source and destination chain blocks.
    """
    payload: Dict[str, Any] = {"hash": hash}
    if count > 0:
        payload["count"] = count
    if sources > 0:
        payload["sources"] = sources
    if destinations > 0:
        payload["destinations"] = destinations
    return client.fetch_list("republish", payload, key="blocks")


def version(*, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """RPC, store and node versions."""
    return client.fetch_map("version")


def stop(*, client: NanoRpcClient = default_client) -> bool:
    """Stop the node safely."""
    return client.is_success("stop")


def deterministic_key(seed: str, index: int, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Derive the key pair at ``index`` of a seed."""
    payload = {"seed": seed, "index": index}
    return client.fetch_map("deterministic_key", payload)


def key_create(*, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Generate a random key pair."""
    return client.fetch_map("key_create")


def key_expand(key: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Derive public key and account from a private key."""
    return client.fetch_map("key_expand", {"key": key})
