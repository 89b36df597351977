"""Business rules applied once both accounts have been resolved"""

from dataclasses import dataclass
from typing import Optional

from instruction_gateway.domain import messages
from instruction_gateway.domain.models import Account, StatusCode


@dataclass(frozen=True)
class RuleViolation:
    """First business rule a transfer failed"""

    code: StatusCode
    reason: str


def validate_transaction(
    amount: int,
    currency: str,
    debit_account: Account,
    credit_account: Account,
) -> Optional[RuleViolation]:
    """
    Check a transfer against the business rules, first failure wins.

    Order:
    1. Debit and credit are the same account      -> AC02
    2. Account currencies differ                  -> CU01
    3. Debit currency differs from instruction's  -> CU01
    4. Debit balance below the amount             -> AC01

    Returns None when the transfer may be settled.
    """
    if debit_account.id == credit_account.id:
        return RuleViolation(StatusCode.SAME_ACCOUNT, messages.SAME_ACCOUNT_ERROR)

    if debit_account.currency != credit_account.currency:
        return RuleViolation(StatusCode.CURRENCY_MISMATCH, messages.CURRENCY_MISMATCH)

    if debit_account.currency != currency:
        return RuleViolation(StatusCode.CURRENCY_MISMATCH, messages.CURRENCY_MISMATCH)

    if debit_account.balance < amount:
        return RuleViolation(StatusCode.INSUFFICIENT_FUNDS, messages.INSUFFICIENT_FUNDS)

    return None
