"""Domain-specific exceptions"""

from typing import Optional

from instruction_gateway.domain import messages
from instruction_gateway.domain.models import InstructionKind


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InstructionSyntaxError(DomainException):
    """Instruction text does not match either sentence shape"""

    def __init__(self, reason: str = messages.MALFORMED_INSTRUCTION, kind: Optional[InstructionKind] = None):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind
