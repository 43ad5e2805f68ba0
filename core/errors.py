"""错误类型 - 放在独立模块中以避免导入顺序问题"""


class CalculatorError(Exception):
    # 所有计算器错误的基类，会话层只需要捕获它
    pass


class ParseFailure(CalculatorError):
    # 整行输入不符合词法，不区分具体原因
    def __init__(self, text):
        super().__init__(f"Cannot parse line: {text!r}")
        self.text = text


class CalcFailure(CalculatorError):
    # 求值失败，调用方保留该行之前的栈
    pass


class StackUnderflow(CalcFailure):
    # 操作符需要的操作数比栈中现有的多
    pass


class MathError(CalcFailure):
    # 溢出、除零或非法指数
    pass
