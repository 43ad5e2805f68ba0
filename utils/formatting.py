"""utils/formatting.py"""
from fractions import Fraction


def format_value(value):
    """整数不带分母，其余输出为 numerator/denominator"""
    value = Fraction(value)
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def render(stack):
    """每个元素前加一个空格，空栈渲染为空字符串"""
    return "".join(f" {format_value(value)}" for value in stack)
