"""核心模块 - Token系统、行解析器、RPN评估器和操作符"""
from .errors import CalculatorError, ParseFailure, CalcFailure, StackUnderflow, MathError
from .token_system import (
    TokenType, OperatorKind, Token, Line, OPERATOR_DEFINITIONS,
    SYMBOL_TO_TOKEN
)
from .operators import Operators
from .parser import Parser, parse_line
from .rpn_evaluator import RPNEvaluator, evaluate

__all__ = [
    'CalculatorError', 'ParseFailure', 'CalcFailure', 'StackUnderflow', 'MathError',
    'TokenType', 'OperatorKind', 'Token', 'Line', 'OPERATOR_DEFINITIONS',
    'SYMBOL_TO_TOKEN',
    'Operators', 'Parser', 'parse_line', 'RPNEvaluator', 'evaluate'
]
