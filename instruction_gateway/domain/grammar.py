"""
Instruction grammar - matches free text against the two sentence shapes.

    debit <amount> <currency> from account <id> for credit to account <id> [on <date>]
    credit <amount> <currency> to account <id> for debit from account <id> [on <date>]

Keywords are case-insensitive; amount, currency, account ids and the date
are taken verbatim. Positions are fixed and the grammar is exact: trailing
tokens other than a single `on <date>` clause are rejected.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from instruction_gateway.domain import messages
from instruction_gateway.domain.exceptions import InstructionSyntaxError
from instruction_gateway.domain.models import InstructionAst, InstructionKind
from instruction_gateway.domain.validators import is_valid_date

MIN_TOKENS = 8
DATE_KEYWORD = "on"


class Slot(Enum):
    """Value positions in a sentence shape"""

    AMOUNT = "amount"
    CURRENCY = "currency"
    DEBIT_ACCOUNT = "debit_account"
    CREDIT_ACCOUNT = "credit_account"


# A shape is the sequence after the leading keyword: plain strings are
# keywords that must appear as written, Slot members capture a token.
Shape = Tuple[Union[str, Slot], ...]

SHAPES: Dict[InstructionKind, Shape] = {
    InstructionKind.DEBIT: (
        Slot.AMOUNT, Slot.CURRENCY,
        "from", "account", Slot.DEBIT_ACCOUNT,
        "for", "credit", "to", "account", Slot.CREDIT_ACCOUNT,
    ),
    InstructionKind.CREDIT: (
        Slot.AMOUNT, Slot.CURRENCY,
        "to", "account", Slot.CREDIT_ACCOUNT,
        "for", "debit", "from", "account", Slot.DEBIT_ACCOUNT,
    ),
}


def tokenize(instruction: str) -> List[str]:
    """Split on whitespace, dropping empty tokens"""
    return instruction.split()


class TokenCursor:
    """Left-to-right walk over instruction tokens"""

    def __init__(self, tokens: List[str], kind: Optional[InstructionKind] = None):
        self.tokens = tokens
        self.kind = kind
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def take(self) -> str:
        """Consume the next token, failing if none is left"""
        if self.at_end():
            raise InstructionSyntaxError(kind=self.kind)
        token = self.tokens[self.position]
        self.position += 1
        return token

    def expect(self, keyword: str) -> None:
        """Consume the next token, which must be `keyword` in any case"""
        if self.at_end() or self.tokens[self.position].lower() != keyword:
            raise InstructionSyntaxError(kind=self.kind)
        self.position += 1


def match_kind(tokens: List[str]) -> InstructionKind:
    """Identify the sentence shape from the leading keyword"""
    if len(tokens) < MIN_TOKENS:
        raise InstructionSyntaxError()
    leading = tokens[0].lower()
    for kind in InstructionKind:
        if leading == kind.value.lower():
            return kind
    raise InstructionSyntaxError()


def _parse_date_clause(cursor: TokenCursor) -> Optional[str]:
    if cursor.at_end():
        return None
    cursor.expect(DATE_KEYWORD)
    date_literal = cursor.take()
    if not is_valid_date(date_literal):
        raise InstructionSyntaxError(messages.INVALID_DATE_FORMAT, kind=cursor.kind)
    if not cursor.at_end():
        raise InstructionSyntaxError(kind=cursor.kind)
    return date_literal


def parse_instruction(instruction: str) -> InstructionAst:
    """
    Parse instruction text into an InstructionAst.

    Raises:
        InstructionSyntaxError: text does not fit either shape, or the
            trailing date is not a real calendar date. `kind` is set once
            the leading keyword has been recognised.
    """
    tokens = tokenize(instruction.strip())
    kind = match_kind(tokens)

    cursor = TokenCursor(tokens, kind)
    cursor.take()  # leading debit/credit keyword

    captured: Dict[Slot, str] = {}
    for expected in SHAPES[kind]:
        if isinstance(expected, Slot):
            captured[expected] = cursor.take()
        else:
            cursor.expect(expected)

    execute_by = _parse_date_clause(cursor)

    return InstructionAst(
        kind=kind,
        amount_literal=captured[Slot.AMOUNT],
        currency_literal=captured[Slot.CURRENCY],
        debit_account_id=captured[Slot.DEBIT_ACCOUNT],
        credit_account_id=captured[Slot.CREDIT_ACCOUNT],
        execute_by=execute_by,
    )
