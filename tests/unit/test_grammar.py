"""Unit tests for instruction grammar matching and field extraction"""

import pytest
from instruction_gateway.domain import messages
from instruction_gateway.domain.exceptions import InstructionSyntaxError
from instruction_gateway.domain.grammar import TokenCursor, parse_instruction, tokenize
from instruction_gateway.domain.models import InstructionKind


def test_parse_debit_shape():
    """Test fields are pulled from their fixed positions in a debit instruction"""
    ast = parse_instruction("debit 100 USD from account acc1 for credit to account acc2")

    assert ast.kind == InstructionKind.DEBIT
    assert ast.amount_literal == "100"
    assert ast.currency_literal == "USD"
    assert ast.debit_account_id == "acc1"
    assert ast.credit_account_id == "acc2"
    assert ast.execute_by is None


def test_parse_credit_shape():
    """Test credit shape names the credit account first"""
    ast = parse_instruction("credit 50 GBP to account b2 for debit from account a1 on 2025-01-01")

    assert ast.kind == InstructionKind.CREDIT
    assert ast.amount_literal == "50"
    assert ast.currency_literal == "GBP"
    assert ast.credit_account_id == "b2"
    assert ast.debit_account_id == "a1"
    assert ast.execute_by == "2025-01-01"


def test_keywords_case_insensitive_values_verbatim():
    """Test keywords match in any case while ids and literals keep theirs"""
    ast = parse_instruction("DEBIT 100 usd FROM Account ACC1 For CREDIT to ACCOUNT Acc2 ON 2025-03-01")

    assert ast.kind == InstructionKind.DEBIT
    assert ast.currency_literal == "usd"
    assert ast.debit_account_id == "ACC1"
    assert ast.credit_account_id == "Acc2"
    assert ast.execute_by == "2025-03-01"


def test_extra_whitespace_ignored():
    """Test runs of spaces, tabs and surrounding whitespace are collapsed"""
    ast = parse_instruction("  debit   100\tUSD from  account acc1 for credit to account acc2  ")

    assert ast.debit_account_id == "acc1"
    assert ast.credit_account_id == "acc2"


def test_tokenize_drops_empty_tokens():
    assert tokenize("a  b\t\tc ") == ["a", "b", "c"]


def test_too_few_tokens():
    """Test short instructions fail before the shape is identified"""
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD from account acc1")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION
    assert exc_info.value.kind is None


def test_unknown_leading_keyword():
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("transfer 100 USD from account acc1 for credit to account acc2")

    assert exc_info.value.kind is None


def test_misspelled_keyword_keeps_kind():
    """Test keyword mismatch after shape selection still reports the kind"""
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD form account acc1 for credit to account acc2")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION
    assert exc_info.value.kind == InstructionKind.DEBIT


def test_keywords_cannot_be_reordered():
    """Test the debit shape's clauses cannot be swapped for the credit shape's"""
    with pytest.raises(InstructionSyntaxError):
        parse_instruction("debit 100 USD to account acc2 for debit from account acc1")


def test_truncated_instruction():
    """Test running out of tokens mid-shape is malformed"""
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD from account acc1 for credit to account")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION


def test_on_without_date():
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD from account acc1 for credit to account acc2 on")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION


def test_trailing_clause_must_start_with_on():
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD from account acc1 for credit to account acc2 at 2025-01-01")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION


def test_tokens_after_date_clause():
    """Test the grammar is exact, not a prefix match"""
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction("debit 100 USD from account acc1 for credit to account acc2 on 2025-01-01 please")

    assert exc_info.value.reason == messages.MALFORMED_INSTRUCTION


@pytest.mark.parametrize("date_literal", ["2025-02-30", "2025-04-31", "2025/01/01", "01-01-2025"])
def test_invalid_date_reported_separately(date_literal: str):
    """Test calendar-invalid dates get their own reason"""
    with pytest.raises(InstructionSyntaxError) as exc_info:
        parse_instruction(f"credit 100 USD to account acc2 for debit from account acc1 on {date_literal}")

    assert exc_info.value.reason == messages.INVALID_DATE_FORMAT
    assert exc_info.value.kind == InstructionKind.CREDIT


def test_amount_and_currency_not_checked_by_grammar():
    """Test literals are captured as written and validated downstream"""
    ast = parse_instruction("debit -12.5 XYZ from account acc1 for credit to account acc2")

    assert ast.amount_literal == "-12.5"
    assert ast.currency_literal == "XYZ"


def test_token_cursor_expect_and_take():
    cursor = TokenCursor(["On", "2025-01-01"])

    cursor.expect("on")
    assert cursor.take() == "2025-01-01"
    assert cursor.at_end()
    with pytest.raises(InstructionSyntaxError):
        cursor.take()
