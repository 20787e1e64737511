"""
Error taxonomy shared by the tokenizer, parser and evaluator
Each stage reports failures as CalcError values instead of raising
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    LEXICAL = "LexicalError"
    SYNTAX = "SyntaxError"
    ARITHMETIC = "ArithmeticError"
    OPERAND = "OperandError"
    FORMAT = "FormatError"


class ErrorKind(Enum):
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    UNMATCHED_OPENING_PARENTHESIS = "unmatched_opening_parenthesis"
    UNMATCHED_CLOSING_PARENTHESIS = "unmatched_closing_parenthesis"
    DIVISION_BY_ZERO = "division_by_zero"
    MODULO_BY_ZERO = "modulo_by_zero"
    OVERFLOW = "overflow"
    DOMAIN_ERROR = "domain_error"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    UNKNOWN_OPERATOR = "unknown_operator"
    NUMBER_FORMAT = "number_format"
    MALFORMED_EXPRESSION = "malformed_expression"

    @property
    def category(self) -> 'ErrorCategory':
        return CATEGORIES[self]


CATEGORIES = {
    ErrorKind.EMPTY_EXPRESSION: ErrorCategory.SYNTAX,
    ErrorKind.INVALID_CHARACTER: ErrorCategory.LEXICAL,
    ErrorKind.UNMATCHED_OPENING_PARENTHESIS: ErrorCategory.SYNTAX,
    ErrorKind.UNMATCHED_CLOSING_PARENTHESIS: ErrorCategory.SYNTAX,
    ErrorKind.DIVISION_BY_ZERO: ErrorCategory.ARITHMETIC,
    ErrorKind.MODULO_BY_ZERO: ErrorCategory.ARITHMETIC,
    ErrorKind.OVERFLOW: ErrorCategory.ARITHMETIC,
    ErrorKind.DOMAIN_ERROR: ErrorCategory.ARITHMETIC,
    ErrorKind.INSUFFICIENT_OPERANDS: ErrorCategory.OPERAND,
    ErrorKind.UNKNOWN_OPERATOR: ErrorCategory.OPERAND,
    ErrorKind.NUMBER_FORMAT: ErrorCategory.FORMAT,
    ErrorKind.MALFORMED_EXPRESSION: ErrorCategory.FORMAT,
}


@dataclass(frozen=True)
class CalcError:
    """A failure reported by one pipeline stage"""
    kind: ErrorKind
    message: str
    position: Optional[int] = None

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category

    def __str__(self) -> str:
        return self.message


class CalculationError(ValueError):
    """Raised when a caller asks for a value from a failed evaluation"""

    def __init__(self, error: CalcError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
