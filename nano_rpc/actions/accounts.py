"""Account actions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from nano_rpc.errors import MissingKeyError
from nano_rpc.node_api import NanoRpcClient, default_client


def create_account(wallet: str, work: bool = True, *, client: NanoRpcClient = default_client) -> str:
    """
    Create a new account from the wallet's next deterministic key.

    Passing ``work=False`` disables work generation for the new account.
    Requires enable_control on the node.
    """
    payload = {"wallet": wallet, "work": work}
    return client.fetch_string("account_create", payload, key="account")


def get_account(key: str, *, client: NanoRpcClient = default_client) -> str:
    """Return the account number for a public key."""
    return client.fetch_string("account_get", {"key": key}, key="account")


def account_info(
    account: str,
    *,
    representative: bool = False,
    weight: bool = False,
    pending: bool = False,
    client: NanoRpcClient = default_client,
) -> Dict[str, str]:
    """
    Return frontier, open block, representative block, balance, modified
    timestamp and block count for an account, plus representative, weight and
    pending balance when the matching flags are set.
    """
    payload = {
        "account": account,
        "representative": representative,
        "weight": weight,
        "pending": pending,
    }
    return client.fetch_map("account_info", payload)


def account_balance(account: str, *, client: NanoRpcClient = default_client) -> Tuple[str, str]:
    """Return ``(balance, pending)`` in raw."""
    fields = client.fetch_map("account_balance", {"account": account})
    for name in ("balance", "pending"):
        if name not in fields:
            raise MissingKeyError(
                f"Response of account_balance has no {name}", action="account_balance"
            )
    return fields["balance"], fields["pending"]


def account_block_count(account: str, *, client: NanoRpcClient = default_client) -> int:
    return client.fetch_int("account_block_count", {"account": account}, key="block_count")


def account_history(
    account: str, count: int, *, client: NanoRpcClient = default_client
) -> List[Dict[str, str]]:
    """Report send/receive entries for an account."""
    payload = {"account": account, "count": count}
    return client.fetch_records("account_history", payload)


def account_key(account: str, *, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string("account_key", {"account": account}, key="key")


def account_representative(account: str, *, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string(
        "account_representative", {"account": account}, key="representative"
    )


def set_account_representative(
    wallet: str,
    account: str,
    representative: str,
    work: str = "",
    *,
    client: NanoRpcClient = default_client,
) -> str:
    """Set the representative of an account and return the change block hash."""
    payload: Dict[str, Any] = {
        "wallet": wallet,
        "account": account,
        "representative": representative,
    }
    if work:
        payload["work"] = work
    return client.fetch_string("account_representative_set", payload, key="block")


def account_weight(account: str, *, client: NanoRpcClient = default_client) -> str:
    return client.fetch_string("account_weight", {"account": account}, key="weight")


def accounts_balances(
    accounts: Sequence[str], *, client: NanoRpcClient = default_client
) -> Dict[str, Dict[str, str]]:
    """Return balance and pending amounts keyed by account."""
    return client.fetch_map_of_maps(
        "accounts_balances", {"accounts": list(accounts)}, key="balances"
    )


def accounts_frontiers(
    accounts: Sequence[str], *, client: NanoRpcClient = default_client
) -> Dict[str, str]:
    """Return the head block hash of each account."""
    return client.fetch_map("accounts_frontiers", {"accounts": list(accounts)}, key="frontiers")


def accounts_pending(
    accounts: Sequence[str],
    count: int,
    *,
    threshold: str = "",
    source: bool = False,
    client: NanoRpcClient = default_client,
) -> Dict[str, Any]:
    """
    Return block hashes not yet received by the given accounts.

    With a threshold only blocks of at least that amount are listed; with
    ``source`` each hash also carries its amount and source account.
    """
    payload: Dict[str, Any] = {"accounts": list(accounts), "count": count}
    if threshold:
        payload["threshold"] = threshold
    if source:
        payload["source"] = source
    return client.fetch_map_interface("accounts_pending", payload, key="blocks")


def delegators(account: str, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Map each delegator of a representative to its balance."""
    return client.fetch_map("delegators", {"account": account}, key="delegators")


def delegators_count(account: str, *, client: NanoRpcClient = default_client) -> int:
    return client.fetch_int("delegators_count", {"account": account}, key="count")


def frontiers(account: str, count: int, *, client: NanoRpcClient = default_client) -> Dict[str, str]:
    """Head blocks of accounts starting at ``account``, up to ``count``."""
    payload = {"account": account, "count": count}
    return client.fetch_map("frontiers", payload, key="frontiers")


def wait_payment(
    account: str, amount: str, timeout: int, *, client: NanoRpcClient = default_client
) -> str:
    """Wait until ``amount`` arrives in ``account`` or ``timeout`` ms pass; return the status."""
    payload = {"account": account, "amount": amount, "timeout": timeout}
    return client.fetch_string("payment_wait", payload, key="status")


def validate_account_number(account: str, *, client: NanoRpcClient = default_client) -> bool:
    return client.is_success("validate_account_number", {"account": account}, key="valid")


def pending(
    account: str,
    count: int,
    *,
    threshold: Optional[str] = None,
    source: bool = False,
    client: NanoRpcClient = default_client,
) -> Any:
    """
    Return pending blocks for an account.

    The node answers with a list of hashes, or with a map of hash to details
    when ``threshold`` or ``source`` is used, so the field is returned as is.
    """
    payload: Dict[str, Any] = {"account": account, "count": count, "source": source}
    if threshold:
        payload["threshold"] = threshold
    return client.fetch_interface("pending", payload, key="blocks")


def get_work(wallet: str, account: str, *, client: NanoRpcClient = default_client) -> str:
    payload = {"wallet": wallet, "account": account}
    return client.fetch_string("work_get", payload, key="work")


def set_work(wallet: str, account: str, work: str, *, client: NanoRpcClient = default_client) -> bool:
    payload = {"wallet": wallet, "account": account, "work": work}
    return client.is_success("work_set", payload)
