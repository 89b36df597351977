"""Account lookup and snapshot ordering"""

from typing import Dict, Iterable, List, Optional, Sequence

from instruction_gateway.domain.models import Account, AccountSnapshot


class AccountResolver:
    """
    Identifier lookup over a caller-supplied account list.

    The first record wins when an identifier appears more than once.
    Resolved identifiers are always reported in the order the accounts
    were supplied, never in the order they were asked for.
    """

    def __init__(self, accounts: Sequence[Account]):
        self._by_id: Dict[str, Account] = {}
        self._position: Dict[str, int] = {}
        for index, account in enumerate(accounts):
            if account.id not in self._by_id:
                self._by_id[account.id] = account
                self._position[account.id] = index

    def find(self, account_id: Optional[str]) -> Optional[Account]:
        if account_id is None:
            return None
        return self._by_id.get(account_id)

    def ordered_ids(self, account_ids: Iterable[str]) -> List[str]:
        """Resolvable ids, deduplicated, in supplied-snapshot order"""
        resolvable = {account_id for account_id in account_ids if account_id in self._by_id}
        return sorted(resolvable, key=self._position.__getitem__)

    def snapshots(self, account_ids: Iterable[str]) -> List[AccountSnapshot]:
        """Unchanged snapshots for every resolvable id"""
        return [unchanged_snapshot(self._by_id[account_id]) for account_id in self.ordered_ids(account_ids)]


def unchanged_snapshot(account: Account) -> AccountSnapshot:
    return moved_snapshot(account, 0)


def moved_snapshot(account: Account, delta: int) -> AccountSnapshot:
    """Snapshot after applying `delta` to the balance"""
    return AccountSnapshot(
        id=account.id,
        balance=account.balance + delta,
        balance_before=account.balance,
        currency=account.currency.upper(),
    )
