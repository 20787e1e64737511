"""
Stack machine evaluating postfix token sequences
"""

import logging
import math
import operator
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from errors import CalcError, CalculationError, ErrorKind
from lexer import Token, TokenType
from postfix import ParseResult

logger = logging.getLogger(__name__)

BINARY_OPERATORS: dict[str, Callable[[float, float], float]] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '%': math.fmod,
    '^': math.pow,
}

ZERO_DIVISOR_ERRORS = {
    '/': (ErrorKind.DIVISION_BY_ZERO, "Division by zero"),
    '%': (ErrorKind.MODULO_BY_ZERO, "Modulo by zero"),
}


@dataclass(frozen=True)
class EvalResult:
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> float:
        """Return the value or raise CalculationError"""
        if self.error is not None:
            raise CalculationError(self.error)
        return self.value

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, position: Optional[int] = None) -> 'EvalResult':
        return cls(error=CalcError(kind, message, position))


def _apply(op: str, left: float, right: float, position: int) -> EvalResult:
    """Apply a binary operator, mapping float errors to results"""
    if op in ZERO_DIVISOR_ERRORS and right == 0:
        kind, message = ZERO_DIVISOR_ERRORS[op]
        return EvalResult.failure(kind, message, position)

    try:
        value = BINARY_OPERATORS[op](left, right)
    except OverflowError:
        value = math.inf
    except ValueError:
        # math.pow refuses results that would be complex
        return EvalResult.failure(ErrorKind.DOMAIN_ERROR, f"Math domain error in {left:g} {op} {right:g}", position)

    if not math.isfinite(value):
        return EvalResult.failure(ErrorKind.OVERFLOW, f"Numeric overflow in {left:g} {op} {right:g}", position)
    return EvalResult(value)


def evaluate(postfix: Union[ParseResult, Iterable[Token]]) -> EvalResult:
    """Evaluate a postfix sequence to a single number"""
    if isinstance(postfix, ParseResult) and not postfix.ok:
        return EvalResult(error=postfix.error)

    stack: list[float] = []

    for token in postfix:
        if token.type == TokenType.NUMBER:
            try:
                value = float(token.value)
            except ValueError:
                return EvalResult.failure(
                    ErrorKind.NUMBER_FORMAT,
                    f"Invalid number '{token.value}' at position {token.position}",
                    token.position,
                )
            if not math.isfinite(value):
                return EvalResult.failure(
                    ErrorKind.OVERFLOW,
                    f"Number too large at position {token.position}",
                    token.position,
                )
            stack.append(value)

        elif token.is_unary:
            if not stack:
                return EvalResult.failure(
                    ErrorKind.INSUFFICIENT_OPERANDS,
                    "Insufficient operands for unary operator",
                    token.position,
                )
            stack.append(-stack.pop())

        elif token.type == TokenType.OPERATOR and token.value in BINARY_OPERATORS:
            if len(stack) < 2:
                return EvalResult.failure(
                    ErrorKind.INSUFFICIENT_OPERANDS,
                    f"Insufficient operands for operator '{token.value}'",
                    token.position,
                )
            right = stack.pop()
            left = stack.pop()
            result = _apply(token.value, left, right, token.position)
            if not result.ok:
                return result
            stack.append(result.value)

        else:
            return EvalResult.failure(
                ErrorKind.UNKNOWN_OPERATOR,
                f"Unknown operator '{token.value}'",
                token.position,
            )

    if len(stack) != 1:
        return EvalResult.failure(ErrorKind.MALFORMED_EXPRESSION, "Invalid expression format")

    return EvalResult(stack[0])
