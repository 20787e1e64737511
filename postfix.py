"""
Shunting-yard conversion of infix tokens into Reverse Polish order
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from errors import CalcError, ErrorKind
from lexer import Token, TokenType, UNARY_MINUS

logger = logging.getLogger(__name__)

PRECEDENCE = {
    UNARY_MINUS: 4,
    '^': 3,
    '*': 2,
    '/': 2,
    '%': 2,
    '+': 1,
    '-': 1,
}


@dataclass(frozen=True)
class ParseResult:
    """Postfix tokens, or the reason parsing failed

    A failed result has no tokens, so it is falsy and empty.
    """
    postfix: tuple[Token, ...] = ()
    error: Optional[CalcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def __iter__(self) -> Iterator[Token]:
        return iter(self.postfix)

    def __len__(self) -> int:
        return len(self.postfix)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, position: Optional[int] = None) -> 'ParseResult':
        logger.debug("Parse failed: %s", message)
        return cls(error=CalcError(kind, message, position))


def precedence(token: Token) -> int:
    """Binding strength of an operator token, 0 for anything else"""
    if token.type != TokenType.OPERATOR:
        return 0
    return PRECEDENCE.get(token.value, 0)


def parse(tokens: Sequence[Token]) -> ParseResult:
    """Reorder tokens into postfix order

    Operators of equal precedence are popped before the new one is pushed,
    so every operator, '^' included, groups left to right.
    """
    if not tokens:
        return ParseResult.failure(ErrorKind.EMPTY_EXPRESSION, "Expression is empty")

    output = []
    stack = []

    for token in tokens:
        if token.is_invalid:
            return ParseResult.failure(
                ErrorKind.INVALID_CHARACTER,
                f"Unexpected character at position {token.position}: '{token.value}'",
                token.position,
            )

        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            while stack and stack[-1].value != '(' and precedence(stack[-1]) >= precedence(token):
                output.append(stack.pop())
            stack.append(token)

        elif token.value == '(':
            stack.append(token)

        else:
            while stack and stack[-1].value != '(':
                output.append(stack.pop())
            if not stack:
                return ParseResult.failure(
                    ErrorKind.UNMATCHED_CLOSING_PARENTHESIS,
                    f"Mismatched parentheses: unmatched ')' at position {token.position}",
                    token.position,
                )
            stack.pop()

    while stack:
        token = stack.pop()
        if token.type == TokenType.PARENTHESIS:
            return ParseResult.failure(
                ErrorKind.UNMATCHED_OPENING_PARENTHESIS,
                f"Mismatched parentheses: unmatched '(' at position {token.position}",
                token.position,
            )
        output.append(token)

    logger.debug("Postfix: %s", ' '.join(t.value for t in output))
    return ParseResult(tuple(output))
