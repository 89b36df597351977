"""Domain models - pure Python dataclasses representing payment entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class InstructionKind(str, Enum):
    """Sentence shape an instruction was written in"""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class StatusCode(str, Enum):
    """Short machine-readable outcome codes"""

    MALFORMED_INSTRUCTION = "SY03"
    INVALID_AMOUNT = "AM01"
    UNSUPPORTED_CURRENCY = "CU02"
    ACCOUNT_NOT_FOUND = "AC03"
    SAME_ACCOUNT = "AC02"
    CURRENCY_MISMATCH = "CU01"
    INSUFFICIENT_FUNDS = "AC01"
    EXECUTED = "AP00"
    SCHEDULED = "AP02"


@dataclass(frozen=True)
class Account:
    """Caller-supplied account record, balance in minor units"""

    id: str
    balance: int
    currency: str


@dataclass(frozen=True)
class InstructionAst:
    """
    Fields extracted from a well-formed instruction.

    Both sentence shapes produce the same structure; `kind` records which
    one was written. Literals are kept verbatim and validated later.
    """

    kind: InstructionKind
    amount_literal: str
    currency_literal: str
    debit_account_id: str
    credit_account_id: str
    execute_by: Optional[str] = None


@dataclass(frozen=True)
class AccountSnapshot:
    """Account state disclosed in an outcome"""

    id: str
    balance: int
    balance_before: int
    currency: str


@dataclass
class TransactionOutcome:
    """Result of processing one instruction"""

    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    type: Optional[InstructionKind] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    accounts: List[AccountSnapshot] = field(default_factory=list)
