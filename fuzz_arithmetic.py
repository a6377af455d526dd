import math
import random

from calculator_cli.errors import CalcError
from calculator_cli.runtime import evaluate
from calculator_cli.tokenizer import tokenize
from calculator_cli.validator import check_well_formed


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except Exception as e:
        return str(e)


def eval_my(words: list[str]) -> float | str:
    try:
        tokens = tokenize(words)
        check_well_formed(tokens)
        return evaluate(tokens)
    except CalcError as e:
        return str(e)


if __name__ == "__main__":
    numbers = ["0", "1", "2", "3.5", "10", "0.25"]
    operators = ["+", "-", "*", "/"]

    def generate(length: int) -> list[str]:
        return [random.choice(numbers if i % 2 == 0 else operators) for i in range(length)]

    while True:
        words = generate(random.randint(1, 5) * 2 - 1)
        code = " ".join(words)

        res_py = eval_py(code)
        res_my = eval_my(words)  # anything but CalcError escaping here is a bug
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
