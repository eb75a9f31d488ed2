"""Wallet and account objects layered on the action wrappers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from nano_rpc.actions import accounts as account_actions
from nano_rpc.actions import wallets as wallet_actions
from nano_rpc.errors import MissingKeyError
from nano_rpc.node_api import NanoRpcClient, default_client
from nano_rpc.units import convert


@dataclass(slots=True)
class Account:
    """An account number plus the last state read from the node."""

    id: str
    client: NanoRpcClient = field(default=default_client, repr=False, compare=False)
    frontier: Optional[str] = None
    open_block: Optional[str] = None
    representative_block: Optional[str] = None
    balance: Optional[str] = None
    modified_timestamp: Optional[str] = None
    block_count: Optional[str] = None

    def refresh(self) -> "Account":
        info = account_actions.account_info(self.id, client=self.client)
        self.frontier = info.get("frontier")
        self.open_block = info.get("open_block")
        self.representative_block = info.get("representative_block")
        self.balance = info.get("balance")
        self.modified_timestamp = info.get("modified_timestamp")
        self.block_count = info.get("block_count")
        return self

    def balance_in(self, unit: str) -> str:
        """Return the cached raw balance expressed in ``unit``, refreshing first if unknown."""
        if self.balance is None:
            self.refresh()
        if self.balance is None:
            raise MissingKeyError(
                f"Response of account_info for {self.id} doesn't contain key balance.",
                action="account_info",
            )
        return convert(self.balance, "raw", unit)


class Wallet:
    """A node wallet and the accounts it holds, cached by account number."""

    def __init__(self, id: str, *, client: NanoRpcClient = default_client) -> None:
        self.id = id
        self.client = client
        self._accounts: Dict[str, Account] = {}

    @classmethod
    def create(cls, *, client: NanoRpcClient = default_client) -> "Wallet":
        return cls(wallet_actions.create_wallet(client=client), client=client)

    def _account(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            account = Account(account_id, client=self.client)
            self._accounts[account_id] = account
        return account

    def create_account(self, work: bool = True) -> Account:
        account_id = account_actions.create_account(self.id, work, client=self.client)
        return self._account(account_id)

    def accounts(self) -> List[Account]:
        """List the wallet's accounts in node order, reusing cached objects."""
        ids = wallet_actions.account_list(self.id, client=self.client)
        return [self._account(account_id) for account_id in ids]

    def __repr__(self) -> str:
        return f"Wallet(id={self.id!r}, accounts={len(self._accounts)})"
