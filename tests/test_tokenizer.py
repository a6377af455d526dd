import math

import pytest

from calculator_cli.errors import CalcError, ErrorKind
from calculator_cli.tokenizer import BinaryOperator, Number, Operator, Token, tokenize, untokenize


@pytest.mark.parametrize(
    "words, expected_tokens",
    [
        pytest.param(
            ["3", "+", "5"],
            [Number(3.0), Operator(BinaryOperator.ADD), Number(5.0)],
        ),
        pytest.param(["42"], [Number(42.0)]),
        pytest.param(["-5", "-", "2.5"], [Number(-5.0), Operator(BinaryOperator.SUB), Number(2.5)]),
        pytest.param(["1e3", "*", ".5"], [Number(1000.0), Operator(BinaryOperator.MUL), Number(0.5)]),
        pytest.param(["/"], [Operator(BinaryOperator.DIV)]),
        pytest.param(["5.", "+", "+2"], [Number(5.0), Operator(BinaryOperator.ADD), Number(2.0)]),
        pytest.param(["2E-1"], [Number(0.2)]),
        # operator placement is not checked here
        pytest.param(["+", "+"], [Operator(BinaryOperator.ADD), Operator(BinaryOperator.ADD)]),
    ],
)
def test_tokenize(words: list[str], expected_tokens: list[Token]) -> None:
    assert tokenize(words) == expected_tokens


def test_tokenize_infinity() -> None:
    [token] = tokenize(["inf"])
    assert isinstance(token, Number)
    assert math.isinf(token.value)


@pytest.mark.parametrize(
    "words, bad_token",
    [
        pytest.param(["3", "+", "five"], "five"),
        pytest.param(["2", "^", "3"], "^"),
        pytest.param(["(", "1", ")"], "("),
        pytest.param(["1", "++", "2"], "++"),
        pytest.param(["1+2"], "1+2"),
        pytest.param(["x", "oops"], "x"),
        pytest.param(["1_000"], "1_000"),
        pytest.param(["\u0663"], "\u0663"),
        pytest.param(["\uff11\uff12"], "\uff11\uff12"),
        pytest.param(["1e"], "1e"),
        pytest.param(["0x10"], "0x10"),
        pytest.param([" 5"], " 5"),
    ],
)
def test_tokenize_invalid_token(words: list[str], bad_token: str) -> None:
    with pytest.raises(CalcError) as exc_info:
        tokenize(words)
    assert exc_info.value.kind is ErrorKind.INVALID_EXPRESSION
    assert exc_info.value.token == bad_token
    assert bad_token in str(exc_info.value)


def test_tokenize_empty() -> None:
    with pytest.raises(CalcError) as exc_info:
        tokenize([])
    assert exc_info.value.kind is ErrorKind.EMPTY_EXPRESSION
    assert exc_info.value.token is None


def test_operator_symbol() -> None:
    assert [Operator(op).symbol for op in BinaryOperator] == ["+", "-", "*", "/"]


def test_untokenize() -> None:
    assert untokenize(tokenize(["3", "+", "5"])) == "3.0 + 5.0"


@pytest.mark.parametrize("word", ["inf", "-Infinity", "INF"])
def test_tokenize_infinity_spellings(word: str) -> None:
    [token] = tokenize([word])
    assert isinstance(token, Number)
    assert math.isinf(token.value)


def test_tokenize_nan() -> None:
    [token] = tokenize(["NaN"])
    assert isinstance(token, Number)
    assert math.isnan(token.value)


def test_number_keeps_its_word() -> None:
    [token] = tokenize(["4"])
    assert token.lexeme == "4"
    assert token == Number(4.0)


@pytest.mark.parametrize(
    "symbol, expected_operator",
    [
        pytest.param("+", BinaryOperator.ADD),
        pytest.param("/", BinaryOperator.DIV),
        pytest.param("^", None),
        pytest.param("", None),
    ],
)
def test_operator_from_symbol(symbol: str, expected_operator: BinaryOperator | None) -> None:
    assert BinaryOperator.from_symbol(symbol) is expected_operator
