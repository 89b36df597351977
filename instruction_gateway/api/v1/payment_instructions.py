"""POST /v1/payment-instructions - process a free-text payment instruction"""

import time
from typing import AbstractSet
from fastapi import APIRouter, Depends, Request

from instruction_gateway.api.v1.schemas import (
    AccountSnapshotSchema,
    PaymentInstructionRequest,
    PaymentInstructionResponse,
)
from instruction_gateway.api.dependencies import get_request_id, get_supported_currencies
from instruction_gateway.domain.models import Account, TransactionOutcome
from instruction_gateway.domain.processor import process_instruction
from instruction_gateway.infrastructure.observability.metrics import record_outcome
from instruction_gateway.infrastructure.observability.logging import log_instruction_outcome

router = APIRouter()


def to_response(outcome: TransactionOutcome) -> PaymentInstructionResponse:
    """Serialize a domain outcome, mapping enums to their wire strings"""
    return PaymentInstructionResponse(
        type=outcome.type.value if outcome.type else None,
        amount=outcome.amount,
        currency=outcome.currency,
        debit_account=outcome.debit_account,
        credit_account=outcome.credit_account,
        execute_by=outcome.execute_by,
        status=outcome.status.value,
        status_reason=outcome.status_reason,
        status_code=outcome.status_code.value,
        accounts=[
            AccountSnapshotSchema(
                id=snapshot.id,
                balance=snapshot.balance,
                balance_before=snapshot.balance_before,
                currency=snapshot.currency,
            )
            for snapshot in outcome.accounts
        ],
    )


@router.post("/payment-instructions", response_model=PaymentInstructionResponse)
def create_payment_instruction(
    request_body: PaymentInstructionRequest,
    request: Request,
    supported_currencies: AbstractSet[str] = Depends(get_supported_currencies),
):
    """
    Parse and settle a payment instruction against the supplied accounts.

    Business failures (bad syntax, unknown account, insufficient funds, ...)
    are reported in the body with HTTP 200; see `status_code`.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    accounts = [
        Account(id=acc.id, balance=acc.balance, currency=acc.currency)
        for acc in request_body.accounts
    ]
    outcome = process_instruction(accounts, request_body.instruction, supported_currencies)

    duration_ms = (time.time() - start_time) * 1000
    record_outcome(outcome)
    log_instruction_outcome(request_id, outcome, duration_ms)

    return to_response(outcome)
