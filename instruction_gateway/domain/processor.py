"""Payment instruction processing - core entry point"""

from datetime import date
from typing import AbstractSet, Optional, Sequence

from instruction_gateway.domain import messages
from instruction_gateway.domain.accounts import AccountResolver
from instruction_gateway.domain.exceptions import InstructionSyntaxError
from instruction_gateway.domain.grammar import parse_instruction
from instruction_gateway.domain.models import (
    Account,
    InstructionAst,
    StatusCode,
    TransactionOutcome,
    TransactionStatus,
)
from instruction_gateway.domain.rules import validate_transaction
from instruction_gateway.domain.settlement import settle
from instruction_gateway.domain.validators import is_valid_amount, leading_integer
from instruction_gateway.infrastructure.observability.logging import log_errors

SUPPORTED_CURRENCIES = frozenset({"NGN", "USD", "GBP", "GHS"})


def _failure(
    ast: InstructionAst,
    resolver: AccountResolver,
    code: StatusCode,
    reason: str,
    amount: Optional[int],
    currency: Optional[str],
) -> TransactionOutcome:
    """Failed outcome disclosing whichever referenced accounts resolve"""
    return TransactionOutcome(
        type=ast.kind,
        amount=amount,
        currency=currency,
        debit_account=ast.debit_account_id,
        credit_account=ast.credit_account_id,
        execute_by=ast.execute_by,
        status=TransactionStatus.FAILED,
        status_reason=reason,
        status_code=code,
        accounts=resolver.snapshots([ast.debit_account_id, ast.credit_account_id]),
    )


def _evaluate(
    accounts: Sequence[Account],
    instruction: str,
    supported_currencies: AbstractSet[str],
    today: Optional[date],
) -> TransactionOutcome:
    try:
        ast = parse_instruction(instruction)
    except InstructionSyntaxError as e:
        return TransactionOutcome(
            type=e.kind,
            status=TransactionStatus.FAILED,
            status_reason=e.reason,
            status_code=StatusCode.MALFORMED_INSTRUCTION,
        )

    resolver = AccountResolver(accounts)
    currency = ast.currency_literal.upper()

    if not is_valid_amount(ast.amount_literal):
        return _failure(
            ast, resolver, StatusCode.INVALID_AMOUNT, messages.INVALID_AMOUNT,
            leading_integer(ast.amount_literal), currency,
        )

    amount = int(ast.amount_literal)

    if currency not in supported_currencies:
        return _failure(
            ast, resolver, StatusCode.UNSUPPORTED_CURRENCY, messages.UNSUPPORTED_CURRENCY, amount, currency,
        )

    debit_account = resolver.find(ast.debit_account_id)
    credit_account = resolver.find(ast.credit_account_id)

    if debit_account is None or credit_account is None:
        missing = ast.debit_account_id if debit_account is None else ast.credit_account_id
        return _failure(
            ast, resolver, StatusCode.ACCOUNT_NOT_FOUND, f"{messages.ACCOUNT_NOT_FOUND}: {missing}", amount, currency,
        )

    violation = validate_transaction(amount, currency, debit_account, credit_account)
    if violation:
        return _failure(ast, resolver, violation.code, violation.reason, amount, currency)

    settlement = settle(resolver, debit_account, credit_account, amount, ast.execute_by, today)

    return TransactionOutcome(
        type=ast.kind,
        amount=amount,
        currency=currency,
        debit_account=ast.debit_account_id,
        credit_account=ast.credit_account_id,
        execute_by=ast.execute_by,
        status=settlement.status,
        status_reason=settlement.status_reason,
        status_code=settlement.status_code,
        accounts=settlement.accounts,
    )


def process_instruction(
    accounts: Sequence[Account],
    instruction: str,
    supported_currencies: AbstractSet[str] = SUPPORTED_CURRENCIES,
    today: Optional[date] = None,
) -> TransactionOutcome:
    """
    Main entry point: turn an instruction and account snapshot into an outcome.

    Flow:
    1. Match the sentence shape and extract fields (SY03)
    2. Validate the amount literal (AM01)
    3. Check the currency is supported (CU02)
    4. Resolve both accounts (AC03)
    5. Apply business rules (AC02, CU01, AC01)
    6. Settle now (AP00) or leave scheduled (AP02)

    Business failures are returned as outcomes. Anything else raised along
    the way is logged and re-raised.

    Args:
        accounts: Account records in caller order; never modified
        instruction: Free-text instruction
        supported_currencies: Uppercase currency codes accepted
        today: Calendar date used for scheduling (default: current UTC date)
    """
    with log_errors("process_instruction"):
        return _evaluate(accounts, instruction, supported_currencies, today)
