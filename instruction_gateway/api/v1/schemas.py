"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional


class AccountSchema(BaseModel):
    """Account record supplied with an instruction"""

    id: str = Field(..., description="Account identifier")
    balance: int = Field(..., description="Balance in minor currency units")
    currency: str = Field(..., description="Account currency code")


class PaymentInstructionRequest(BaseModel):
    """Request body for POST /v1/payment-instructions"""

    accounts: List[AccountSchema]
    instruction: str = Field(..., description="Free-text payment instruction")


class AccountSnapshotSchema(BaseModel):
    """Account state before and after the instruction"""

    id: str
    balance: int
    balance_before: int
    currency: str


class PaymentInstructionResponse(BaseModel):
    """Response for POST /v1/payment-instructions"""

    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: str
    status_reason: str
    status_code: str
    accounts: List[AccountSnapshotSchema]
