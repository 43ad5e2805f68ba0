"""交互会话的状态"""
import logging

from config.config import SESSION_CONFIG
from core import parse_line, evaluate, ParseFailure, StackUnderflow, MathError
from utils.formatting import format_value, render

logger = logging.getLogger(__name__)


class Session:
    """
    每行输入独立解析、求值；只有成功时才替换栈
    失败时栈保持为该行开始前的状态
    """

    def __init__(self, stack=None, config=None):
        self.stack = list(stack) if stack else []
        self.config = dict(SESSION_CONFIG, **(config or {}))

    def is_exit_command(self, text):
        return text.rstrip("\r\n") == self.config["exit_command"]

    def feed(self, text):
        """
        处理一行输入
        Returns:
            要显示给用户的回复；成功但栈为空时返回None
        """
        try:
            line = parse_line(text)
        except ParseFailure:
            logger.debug(f"Rejected line: {text!r}")
            return self.config["parse_error_message"]

        try:
            new_stack = evaluate(self.stack, line)
        except StackUnderflow as e:
            logger.debug(f"Stack underflow ({e}), keeping previous stack")
            return f"Stack: {render(self.stack)}, {self.config['underflow_message']}"
        except MathError as e:
            logger.debug(f"Math error ({e}), keeping previous stack")
            return f"Stack: {render(self.stack)}, {self.config['math_error_message']}"

        self.stack = new_stack
        logger.debug(f"Accepted line with {len(line)} tokens, stack depth {len(self.stack)}")
        if not self.stack:
            return None
        return f"Stack: {render(self.stack)}, Result: {format_value(self.stack[-1])}"
