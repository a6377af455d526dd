import logging

from calculator_cli.tokenizer import BinaryOperator, Number, Operator, Token, untokenize

logger = logging.getLogger(__name__)

_PRECEDENCE = {
    BinaryOperator.ADD: 1,
    BinaryOperator.SUB: 1,
    BinaryOperator.MUL: 2,
    BinaryOperator.DIV: 2,
}


def get_op_precedence(op: BinaryOperator) -> int:
    # unknown operators sink below every real one
    return _PRECEDENCE.get(op, 0)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (RPN) order with the shunting-yard algorithm.

    Operators of equal precedence are popped before the new one is pushed, so
    chains like ``10 - 3 - 2`` come out as ``10 3 - 2 -`` and are evaluated
    left to right.
    """
    output: list[Token] = []
    operator_stack: list[Operator] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            precedence = get_op_precedence(token.operator)
            while operator_stack and get_op_precedence(operator_stack[-1].operator) >= precedence:
                output.append(operator_stack.pop())
            operator_stack.append(token)
        else:
            raise RuntimeError(f"Unexpected token: {token!r}")

    while operator_stack:
        output.append(operator_stack.pop())

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix: %s", untokenize(output))
    return output
