"""
Calculator facade: runs the tokenize -> parse -> evaluate pipeline
and keeps a caller-owned history of expressions and outcomes
"""

import logging
import math
from collections import deque
from typing import Iterator, NamedTuple, Optional

import settings
from evaluator import EvalResult, evaluate
from lexer import tokenize
from postfix import parse

logger = logging.getLogger(__name__)


class HistoryEntry(NamedTuple):
    expression: str
    result: str


class History:
    """Ordered log of (expression, rendered outcome) pairs"""

    def __init__(self, max_entries: Optional[int] = None):
        self._entries: deque[HistoryEntry] = deque(maxlen=max_entries)

    def add(self, expression: str, result: str):
        self._entries.append(HistoryEntry(expression, result))

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def recent(self, n: int = 10) -> tuple[HistoryEntry, ...]:
        """Last n entries, oldest first"""
        if n <= 0:
            return ()
        return tuple(self._entries)[-n:]

    def clear(self):
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))


def format_result(value: float) -> str:
    """Format a result based on its magnitude"""
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        return "0"
    if abs(value) < settings.SCIENTIFIC_LOW or abs(value) > settings.SCIENTIFIC_HIGH:
        return f"{value:.2e}"
    if value == int(value):
        return str(int(value))
    return str(value)


class Calculator:
    """Main calculator interface with history"""

    def __init__(self, history: Optional[History] = None):
        self.history = history if history is not None else History(settings.HISTORY_LIMIT)

    def run(self, expression: str) -> EvalResult:
        """Evaluate expression and record the outcome in history"""
        tokens = tokenize(expression)
        result = evaluate(parse(tokens))

        if result.ok:
            logger.info("%s = %s", expression.strip(), result.value)
        else:
            logger.warning("%s: %s [%s, %s]", expression.strip(), result.error.message,
                           result.error.category.value, result.error.kind.name)

        self.history.add(expression, self.render(result))
        return result

    def evaluate(self, expression: str) -> float:
        """Evaluate expression, raising CalculationError on failure"""
        return self.run(expression).unwrap()

    @staticmethod
    def render(result: EvalResult) -> str:
        if result.ok:
            return format_result(result.value)
        return f"Error: {result.error.message}"
