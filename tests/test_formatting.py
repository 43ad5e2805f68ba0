from fractions import Fraction

from utils import format_value, render


def test_format_value():
    assert format_value(Fraction(3)) == "3"
    assert format_value(Fraction(-1, 4)) == "-1/4"
    assert format_value(Fraction(6, 4)) == "3/2"


def test_render():
    assert render([]) == ""
    assert render([Fraction(1, 2), Fraction(3)]) == " 1/2 3"
    assert render([Fraction(-36)]) == " -36"
