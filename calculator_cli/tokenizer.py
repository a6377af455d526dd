import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from calculator_cli.errors import CalcError
from calculator_cli.utils import SymbolEnum

logger = logging.getLogger(__name__)

# ASCII-only float literals: no digit-group underscores, no non-latin digits
NUMBER_PATTERN = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


class BinaryOperator(SymbolEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Number:
    value: float
    lexeme: str = field(default="", compare=False, repr=False)

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    operator: BinaryOperator

    @property
    def symbol(self) -> str:
        return self.operator.value

    def __str__(self) -> str:
        return self.symbol


Token = Number | Operator


def _parse_number(raw: str) -> float | None:
    if NUMBER_PATTERN.fullmatch(raw) is None:
        return None
    return float(raw)


def tokenize(raw_tokens: Sequence[str]) -> list[Token]:
    """Turn whitespace-split words into typed tokens.

    Only the form of each word is checked here; operator placement is not, so
    ``["+", "+"]`` tokenizes fine and fails later during evaluation.
    """
    tokens: list[Token] = []
    for raw in raw_tokens:
        value = _parse_number(raw)
        if value is not None:
            tokens.append(Number(value, lexeme=raw))
            continue
        operator = BinaryOperator.from_symbol(raw) if len(raw) == 1 else None
        if operator is None:
            raise CalcError.invalid_token(raw)
        tokens.append(Operator(operator))

    if not tokens:
        raise CalcError.empty_expression()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tokenized %d word(s): %s", len(tokens), untokenize(tokens))
    return tokens


def untokenize(tokens: Sequence[Token]) -> str:
    return " ".join(str(t) for t in tokens)
