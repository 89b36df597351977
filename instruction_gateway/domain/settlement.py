"""Settlement - apply a validated transfer now or leave it scheduled"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from instruction_gateway.domain import messages
from instruction_gateway.domain.accounts import AccountResolver, moved_snapshot, unchanged_snapshot
from instruction_gateway.domain.models import Account, AccountSnapshot, StatusCode, TransactionStatus
from instruction_gateway.domain.validators import is_future_date


@dataclass
class Settlement:
    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    accounts: List[AccountSnapshot]


def settle(
    resolver: AccountResolver,
    debit_account: Account,
    credit_account: Account,
    amount: int,
    execute_by: Optional[str] = None,
    today: Optional[date] = None,
) -> Settlement:
    """
    Execute the transfer unless it is dated after today (UTC).

    Same-day and past dates execute immediately. Future-dated transfers are
    reported as pending with balances untouched; nothing is queued.
    """
    executes_now = execute_by is None or not is_future_date(execute_by, today)

    snapshots = []
    for account_id in resolver.ordered_ids([debit_account.id, credit_account.id]):
        account = debit_account if account_id == debit_account.id else credit_account
        if not executes_now:
            snapshots.append(unchanged_snapshot(account))
        elif account_id == debit_account.id:
            snapshots.append(moved_snapshot(account, -amount))
        else:
            snapshots.append(moved_snapshot(account, amount))

    if executes_now:
        return Settlement(TransactionStatus.SUCCESSFUL, StatusCode.EXECUTED, messages.TRANSACTION_SUCCESSFUL, snapshots)
    return Settlement(TransactionStatus.PENDING, StatusCode.SCHEDULED, messages.TRANSACTION_PENDING, snapshots)
