"""Optional strict grammar check, run between tokenizing and evaluating.

The default pipeline accepts sequences such as ``3 + + 4`` and only notices the
problem while evaluating. ``check_well_formed`` rejects them up front: a valid
expression alternates numbers and operators, starting and ending on a number.
"""
from calculator_cli.errors import CalcError, ErrorKind
from calculator_cli.tokenizer import Number, Operator, Token


def check_well_formed(tokens: list[Token]) -> None:
    if not tokens:
        raise CalcError.empty_expression()

    for position, token in enumerate(tokens):
        if isinstance(token, Operator):
            if position == 0 or position == len(tokens) - 1:
                raise CalcError(
                    ErrorKind.INVALID_OPERATOR,
                    f"Operator {token.symbol!r} is missing an operand",
                    token=token.symbol,
                )
            if isinstance(tokens[position - 1], Operator):
                raise CalcError(
                    ErrorKind.CONSECUTIVE_OPERATORS,
                    f"Operator {token.symbol!r} follows another operator",
                    token=token.symbol,
                )
        elif isinstance(token, Number):
            if position > 0 and isinstance(tokens[position - 1], Number):
                raise CalcError(
                    ErrorKind.INVALID_EXPRESSION,
                    f"Number {token.lexeme or token} follows another number without an operator",
                    token=token.lexeme or str(token),
                )
        else:
            raise RuntimeError(f"Unexpected token: {token!r}")
