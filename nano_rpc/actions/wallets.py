"""Wallet actions. Most of these require enable_control on the node."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from nano_rpc.node_api import NanoRpcClient, default_client


def account_list(wallet: str, *, client: NanoRpcClient = default_client) -> List[str]:
    """List all accounts inside a wallet."""
    return client.fetch_list("account_list", {"wallet": wallet}, key="accounts")


def move_accounts(
    wallet: str, source: str, accounts: Sequence[str], *, client: NanoRpcClient = default_client
) -> bool:
    """Move accounts from the ``source`` wallet into ``wallet``."""
    payload = {"wallet": wallet, "source": source, "accounts": list(accounts)}
    return client.is_success("account_move", payload, key="moved")


def remove_account(wallet: str, account: str, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"wallet": wallet, "account": account}
    return client.is_success("account_remove", payload, key="removed")


def create_accounts(
    wallet: str, count: int, work: bool = True, *, client: NanoRpcClient = default_client
) -> List[str]:
    """Create ``count`` accounts from the wallet's next deterministic keys."""
    payload = {"wallet": wallet, "count": count, "work": work}
    return client.fetch_list("accounts_create", payload, key="accounts")


def begin_payment(wallet: str, *, client: NanoRpcClient = default_client) -> str:
    """
    Start a payment session.

    The node picks an available account with a zero balance, or creates one,
    marks it unavailable and returns it.
    """
    return client.fetch_string("payment_begin", {"wallet": wallet}, key="account")


def init_payment(wallet: str, *, client: NanoRpcClient = default_client) -> str:
    """Mark every account in the wallet as available for payment sessions."""
    return client.fetch_string("payment_init", {"wallet": wallet}, key="status")


def end_payment(wallet: str, account: str, *, client: NanoRpcClient = default_client) -> None:
    client.execute("payment_end", {"wallet": wallet, "account": account})


def receive_block(
    wallet: str,
    account: str,
    block: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> str:
    """Receive a pending block for an account and return the receive block hash."""
    payload: Dict[str, Any] = {"wallet": wallet, "account": account, "block": block}
    if work:
        payload["work"] = work
    return client.fetch_string("receive", payload, key="block")


def wallet_representative(wallet: str, *, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string("wallet_representative", {"wallet": wallet}, key="representative")


def set_wallet_representative(
    wallet: str, representative: str, *, client: NanoRpcClient = default_client
) -> bool:
    payload = {"wallet": wallet, "representative": representative}
    return client.is_success("wallet_representative_set", payload, key="set")


def search_pending(wallet: str, *, client: NanoRpcClient = default_client) -> bool:
    """Ask the node to look for pending blocks for every account in the wallet."""
    return client.is_success("search_pending", {"wallet": wallet}, key="started")


def send(
    wallet: str,
    source: str,
    destination: str,
    amount: str,
    id: str = "",
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> str:
    """
    Send ``amount`` raw from ``source`` to ``destination`` and return the block hash.

    A unique ``id`` makes the request idempotent: repeating a send with the
    same id returns the first block instead of sending again.
    """
    payload: Dict[str, Any] = {
        "wallet": wallet,
        "source": source,
        "destination": destination,
        "amount": amount,
    }
    if id:
        payload["id"] = id
    if work:
        payload["work"] = work
    return client.fetch_string("send", payload, key="block")


def wallet_add(
    wallet: str, key: str, work: bool = True, *, client: NanoRpcClient = default_client
) -> str:
    """Add an adhoc private key to the wallet and return its account."""
    payload = {"wallet": wallet, "key": key, "work": work}
    return client.fetch_string("wallet_add", payload, key="account")


def wallet_total_balance(wallet: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Sum of balance and pending over every account in the wallet."""
    return client.fetch_map("wallet_balance_total", {"wallet": wallet})


def wallet_balances(
    wallet: str, threshold: str = "", *, client: NanoRpcClient = default_client
) -> Dict[str, Dict[str, str]]:
    """Balance and pending per account; with ``threshold`` only accounts at or above it."""
    payload: Dict[str, Any] = {"wallet": wallet}
    if threshold:
        payload["threshold"] = threshold
    return client.fetch_map_of_maps("wallet_balances", payload, key="balances")


def change_wallet_seed(wallet: str, seed: str, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"wallet": wallet, "seed": seed}
    return client.is_success("wallet_change_seed", payload)


def wallet_contains(wallet: str, account: str, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"wallet": wallet, "account": account}
    return client.is_success("wallet_contains", payload, key="exists")


def create_wallet(*, client: NanoRpcClient = default_client) -> str:
    """Create a new random wallet and return its id."""
    return client.fetch_string("wallet_create", key="wallet")


def destroy_wallet(wallet: str, *, client: NanoRpcClient = default_client) -> None:
    """Destroy a wallet and every account in it."""
    client.execute("wallet_destroy", {"wallet": wallet})


def export_wallet(wallet: str, *, client: NanoRpcClient = default_client) -> str:
    """Return the wallet's JSON export as text."""
    return client.fetch_string("wallet_export", {"wallet": wallet}, key="json")


def wallet_frontiers(wallet: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    return client.fetch_map("wallet_frontiers", {"wallet": wallet}, key="frontiers")


def wallet_pending(
    wallet: str,
    count: int,
    *,
    threshold: str = "",
    source: bool = False,
    client: NanoRpcClient = default_client,
) -> Dict[str, Any]:
    """Pending block hashes per account of the wallet."""
    payload: Dict[str, Any] = {"wallet": wallet, "count": count, "source": source}
    if threshold:
        payload["threshold"] = threshold
    return client.fetch_map_interface("wallet_pending", payload, key="blocks")


def wallet_republish(wallet: str, count: int, *, client: NanoRpcClient = default_client) -> List[str]:
    """Rebroadcast blocks of the wallet's accounts, from each frontier down to ``count``."""
    payload = {"wallet": wallet, "count": count}
    return client.fetch_list("wallet_republish", payload, key="blocks")


def wallet_work_get(wallet: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Map each account of the wallet to its cached work."""
    return client.fetch_map("wallet_work_get", {"wallet": wallet}, key="works")


def change_wallet_password(
    wallet: str, password: str, *, client: NanoRpcClient = default_client
) -> bool:
    payload = {"wallet": wallet, "password": password}
    return client.is_success("password_change", payload, key="changed")


def enter_wallet_password(
    wallet: str, password: str, *, client: NanoRpcClient = default_client
) -> bool:
    payload = {"wallet": wallet, "password": password}
    return client.is_success("password_enter", payload, key="valid")


def wallet_password_valid(wallet: str, *, client: NanoRpcClient = default_client) -> bool:
    """Check whether the password entered for the wallet is valid."""
    return client.is_success("password_valid", {"wallet": wallet}, key="valid")


def is_wallet_locked(wallet: str, *, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("password_locked", {"wallet": wallet}, key="locked")
