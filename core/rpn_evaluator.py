"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from fractions import Fraction

from core.errors import StackUnderflow
from core.operators import Operators
from core.token_system import TokenType, OperatorKind

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """在栈上逐个应用一行Token"""

    @staticmethod
    def evaluate(stack, line):
        """
        从左到右折叠一行Token
        Args:
            stack: 上一次成功求值后的栈（不会被修改）
            line: parse_line 返回的Token序列
        Returns:
            新的栈（list of Fraction）
        Raises:
            StackUnderflow: 操作数不足
            MathError: 溢出、除零或非法指数
        任何一个Token失败都会中止整行，调用方手中的旧栈保持不变
        """
        stack = [Fraction(value) for value in stack]

        for token in line:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            kind = token.kind
            # ================== 二元操作符处理 ==================
            if token.arity == 2:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}: stack has {len(stack)}")
                    raise StackUnderflow(f"{kind.symbol} needs 2 operands, stack has {len(stack)}")
                operand2 = stack.pop()
                operand1 = stack.pop()

                op_method = getattr(Operators, token.name)
                stack.append(op_method(operand1, operand2))

            # ================== 整栈操作符处理 ==================
            elif kind == OperatorKind.SUM:
                stack = [Operators.sum(stack)]
            elif kind == OperatorKind.CLEAR:
                stack = []

        return stack


def evaluate(stack, line):
    return RPNEvaluator.evaluate(stack, line)
