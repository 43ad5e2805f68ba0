"""core/operators.py"""
import logging
from fractions import Fraction

import numpy as np

from config.config import CALCULATOR_CONFIG
from core.errors import MathError

_INTEGER_INFO = np.iinfo(f"int{CALCULATOR_CONFIG['integer_bits']}")
_EXPONENT_INFO = np.iinfo(f"int{CALCULATOR_CONFIG['exponent_bits']}")

MAX_VALUE = int(_INTEGER_INFO.max)  # 分子/分母上限
MIN_VALUE = int(_INTEGER_INFO.min)  # 分子/分母下限
MAX_EXPONENT = int(_EXPONENT_INFO.max)

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，全部为带溢出检查的精确有理数运算"""

    @staticmethod
    def fits(value):
        """分子和分母是否都在定宽整数范围内"""
        value = Fraction(value)
        return (MIN_VALUE <= value.numerator <= MAX_VALUE
                and MIN_VALUE <= value.denominator <= MAX_VALUE)

    @staticmethod
    def checked(value, op_name):
        """超出范围时抛出MathError，否则原样返回"""
        if not Operators.fits(value):
            logger.debug(f"Overflow in {op_name}: {value}")
            raise MathError(f"overflow in {op_name}")
        return value

    # 二元操作符========================================
    # 约定 operand1 为较早入栈的左操作数，operand2 为栈顶

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return Operators.checked(operand1 + operand2, 'add')

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return Operators.checked(operand1 - operand2, 'sub')

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return Operators.checked(operand1 * operand2, 'mul')

    @staticmethod
    def div(operand1, operand2):
        """精确除法，除数为0时抛出MathError"""
        if operand2 == 0:
            logger.debug(f"Division by zero: {operand1} / 0")
            raise MathError("division by zero")
        return Operators.checked(Fraction(operand1) / Fraction(operand2), 'div')

    @staticmethod
    def pow(base, exponent):
        """
        乘方：指数必须是不超过指数位宽的非负整数
        用平方-乘法逐步计算，每一步都做溢出检查，避免构造巨大的中间值
        """
        exponent = Fraction(exponent)
        if exponent.denominator != 1:
            logger.debug(f"Non-integral exponent: {exponent}")
            raise MathError(f"non-integral exponent {exponent}")
        if not 0 <= exponent <= MAX_EXPONENT:
            logger.debug(f"Exponent out of range: {exponent}")
            raise MathError(f"exponent {exponent} out of range")

        n = exponent.numerator
        result = Fraction(1)
        square = Fraction(base)
        while n:
            if n & 1:
                result = Operators.mul(result, square)
            n >>= 1
            if n:
                square = Operators.mul(square, square)
        return result

    # 整栈操作符========================================

    @staticmethod
    def sum(values):
        """逐项累加，每一步检查溢出；空序列的和为0"""
        total = Fraction(0)
        for value in values:
            total = Operators.add(total, value)
        return total
