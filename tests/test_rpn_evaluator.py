from fractions import Fraction

import pytest

from core import evaluate, parse_line, StackUnderflow, MathError, CalcFailure


def calc(text, stack=()):
    return evaluate(list(stack), parse_line(text))


@pytest.mark.parametrize("text, expected", [
    ("3 6 +", [9]),
    ("3 6 *", [18]),
    ("3 6 + 2 *", [18]),
    ("5 2 -", [3]),
    ("6 3 - 2 -", [1]),
    ("6 -3 - -2 -", [11]),
    ("6 +3 - -2 *", [-6]),
    ("3 6-2**", [-36]),
    ("3 2 ^", [9]),
    ("3 2 / 2 ^", [Fraction(9, 4)]),
    ("2 4 6 S", [12]),
    ("2 -4 S", [-2]),
    ("1 2 3", [1, 2, 3]),
])
def test_calculating_integers(text, expected):
    assert calc(text) == expected


def test_creating_fractions():
    assert calc("1 2 /") == [Fraction(1, 2)]
    assert calc("2 4 /") == [Fraction(1, 2)]


def test_operations_on_fractions():
    assert calc("1 2 / 1 2 / +") == [1]
    assert calc("1 2 / 1 2 / *") == [Fraction(1, 4)]
    assert calc("1 2 / 1 2 / -") == [0]


@pytest.mark.parametrize("b, c", [(1, 3), (7, -2), (-5, 9), (2 ** 40, 3)])
def test_divide_then_multiply_restores_value(b, c):
    assert calc(f"{b} {c} / {c} *") == [b]


@pytest.mark.parametrize("text", ["+", "1+", "1 -", "*", "/", "^", "1 2 + +"])
def test_op_on_short_stack(text):
    with pytest.raises(StackUnderflow):
        calc(text)


@pytest.mark.parametrize("text", [
    "5 0 /",
    "2 -1 ^",
    "2 1 2 / ^",
    "2 63 ^",
    "9223372036854775807 1 +",
    "-9223372036854775808 1 -",
    "4294967296 2147483648 *",
])
def test_math_errors(text):
    with pytest.raises(MathError):
        calc(text)


def test_both_failures_are_calc_failures():
    for text in ("+", "1 0 /"):
        with pytest.raises(CalcFailure):
            calc(text)


def test_sum_and_clear_on_empty_stack():
    assert calc("S") == [0]
    assert calc("c") == []
    assert calc("c", [Fraction(1), Fraction(2)]) == []


def test_clear_then_continue():
    assert calc("1 2 c 3 4 +") == [7]


def test_evaluates_against_existing_stack():
    assert calc("2 *", [Fraction(4)]) == [8]
    assert calc("S", [Fraction(1, 2), Fraction(1, 2)]) == [1]


def test_failure_leaves_caller_stack_untouched():
    stack = [Fraction(1), Fraction(2)]
    with pytest.raises(MathError):
        evaluate(stack, parse_line("3 + 0 /"))
    assert stack == [1, 2]


def test_success_returns_new_stack():
    stack = [Fraction(1), Fraction(2)]
    result = evaluate(stack, parse_line("+"))
    assert result == [3]
    assert stack == [1, 2]


def test_empty_line_keeps_stack():
    assert calc("", [Fraction(5)]) == [5]


def test_sum_overflow():
    with pytest.raises(MathError):
        calc("9223372036854775807 1 S")
    stack = [Fraction(2 ** 62), Fraction(2 ** 62)]
    with pytest.raises(MathError):
        evaluate(stack, parse_line("S"))
    assert stack == [2 ** 62, 2 ** 62]
