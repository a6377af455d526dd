import enum
from dataclasses import dataclass
from typing import Optional

from calculator_cli.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_EXPRESSION = enum.auto()
    EMPTY_EXPRESSION = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    TOO_MANY_OPERATORS = enum.auto()
    # only raised by the strict well-formedness check
    INVALID_OPERATOR = enum.auto()
    CONSECUTIVE_OPERATORS = enum.auto()


@dataclass
class CalcError(Exception):
    """User-facing failure of a pipeline stage.

    The set of kinds is closed; ``token`` holds the raw token or operator symbol
    the error is about, when there is one.
    """

    kind: ErrorKind
    errmsg: str
    token: Optional[str] = None

    def __str__(self) -> str:
        return f"[{self.kind}] {self.errmsg}"

    @classmethod
    def invalid_token(cls, token: str) -> "CalcError":
        return cls(ErrorKind.INVALID_EXPRESSION, f"Invalid token: {token}", token=token)

    @classmethod
    def not_enough_operands(cls, symbol: str) -> "CalcError":
        return cls(ErrorKind.INVALID_EXPRESSION, f"Not enough operands for operator {symbol!r}", token=symbol)

    @classmethod
    def empty_expression(cls) -> "CalcError":
        return cls(ErrorKind.EMPTY_EXPRESSION, "No valid tokens found in the expression")

    @classmethod
    def division_by_zero(cls) -> "CalcError":
        return cls(ErrorKind.DIVISION_BY_ZERO, "Division by zero")

    @classmethod
    def too_many_operators(cls, values_left: int) -> "CalcError":
        return cls(
            ErrorKind.TOO_MANY_OPERATORS,
            f"Expression must reduce to exactly one value, {values_left} left on the stack",
        )
