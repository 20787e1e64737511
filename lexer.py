"""
Lexical analysis for arithmetic expressions
Turns raw text into numbers, operators and parentheses
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

OPERATORS = '+-*/%^'
UNARY_MINUS = '~'
DIGITS = '0123456789.'


class TokenType(Enum):
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    PARENTHESIS = "PARENTHESIS"
    INVALID = "INVALID"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: int = 0

    @property
    def is_invalid(self) -> bool:
        return self.type == TokenType.INVALID

    @property
    def is_unary(self) -> bool:
        return self.type == TokenType.OPERATOR and self.value == UNARY_MINUS


def tokenize(expression: str) -> list[Token]:
    """Convert expression string into tokens

    On an unrecognised character the result is a single INVALID token
    holding that character; nothing after it is scanned.
    """
    tokens = []
    may_be_unary = True
    i = 0

    while i < len(expression):
        char = expression[i]

        if char.isspace():
            i += 1

        # Numbers are taken greedily, format is checked by the evaluator
        elif char in DIGITS:
            j = i
            while j < len(expression) and expression[j] in DIGITS:
                j += 1
            tokens.append(Token(TokenType.NUMBER, expression[i:j], i))
            may_be_unary = False
            i = j

        elif char in OPERATORS:
            if char == '-' and may_be_unary:
                tokens.append(Token(TokenType.OPERATOR, UNARY_MINUS, i))
            elif char == '+' and may_be_unary:
                pass  # unary plus
            else:
                tokens.append(Token(TokenType.OPERATOR, char, i))
            may_be_unary = True
            i += 1

        elif char in '()':
            tokens.append(Token(TokenType.PARENTHESIS, char, i))
            may_be_unary = char == '('
            i += 1

        else:
            logger.debug("Invalid character %r at position %d", char, i)
            return [Token(TokenType.INVALID, char, i)]

    logger.debug("Tokens: %s", ' '.join(t.value for t in tokens))
    return tokens
