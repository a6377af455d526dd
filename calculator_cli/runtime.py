import logging
import operator
from typing import Callable

from calculator_cli.errors import CalcError
from calculator_cli.parser import to_postfix
from calculator_cli.tokenizer import BinaryOperator, Number, Operator, Token

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        raise CalcError.division_by_zero()
    return a / b


binary_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: _divide,
}


def evaluate(tokens: list[Token]) -> float:
    return evaluate_postfix(to_postfix(tokens))


def evaluate_postfix(tokens: list[Token]) -> float:
    stack: list[float] = []
    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise CalcError.not_enough_operands(token.symbol)
            b = stack.pop()
            a = stack.pop()
            stack.append(eval_binary_operation(token.operator, a, b))
        else:
            raise RuntimeError(f"Unexpected token: {token!r}")

    if len(stack) != 1:
        raise CalcError.too_many_operators(len(stack))

    logger.debug("Evaluated %d token(s) to %r", len(tokens), stack[0])
    return stack[0]


def eval_binary_operation(op: BinaryOperator, a: float, b: float) -> float:
    """Apply ``op`` as ``a <op> b``; ``a`` is the operand that was pushed first"""
    impl = binary_impls.get(op)
    if impl is None:
        raise RuntimeError(f"Unexpected binary operator: {op}")
    return impl(a, b)
