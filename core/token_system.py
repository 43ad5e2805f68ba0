"""core/token_system.py"""
from enum import Enum
from fractions import Fraction


class TokenType(Enum):
    NUMBER = "number"  # 有理数字面量
    OPERATOR = "operator"  # 操作符


class OperatorKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    SUM = "S"  # 整栈求和
    POWER = "^"
    CLEAR = "c"  # 清空栈

    @property
    def symbol(self):
        return self.value


class Token:
    def __init__(self, token_type, name, value=None, arity=0):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity  # None 表示作用于整个栈

    @classmethod
    def number(cls, value):
        value = Fraction(value)
        return cls(TokenType.NUMBER, str(value), value=value)

    @classmethod
    def operator(cls, kind):
        return OPERATOR_DEFINITIONS[kind]

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def kind(self):
        """操作符种类；数字返回None"""
        return self.value if self.type == TokenType.OPERATOR else None

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.is_number:
            return f"Number({self.value})"
        return f"Operator({self.value.name})"


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    # 二元操作符（需要2个操作数）
    OperatorKind.ADD: Token(TokenType.OPERATOR, 'add', value=OperatorKind.ADD, arity=2),
    OperatorKind.SUBTRACT: Token(TokenType.OPERATOR, 'sub', value=OperatorKind.SUBTRACT, arity=2),
    OperatorKind.MULTIPLY: Token(TokenType.OPERATOR, 'mul', value=OperatorKind.MULTIPLY, arity=2),
    OperatorKind.DIVIDE: Token(TokenType.OPERATOR, 'div', value=OperatorKind.DIVIDE, arity=2),
    OperatorKind.POWER: Token(TokenType.OPERATOR, 'pow', value=OperatorKind.POWER, arity=2),

    # 整栈操作符
    OperatorKind.SUM: Token(TokenType.OPERATOR, 'sum', value=OperatorKind.SUM, arity=None),
    OperatorKind.CLEAR: Token(TokenType.OPERATOR, 'clear', value=OperatorKind.CLEAR, arity=None),
}

# 符号到Token的映射，解析器按单字符查表
SYMBOL_TO_TOKEN = {kind.symbol: token for kind, token in OPERATOR_DEFINITIONS.items()}


class Line(list):
    """一次解析得到的Token序列"""

    def __repr__(self):
        return f"Line({list.__repr__(self)})"
