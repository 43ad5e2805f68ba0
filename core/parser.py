"""行解析器 - 把一行文本转换为Token序列"""
import logging
import re

from core.errors import ParseFailure
from core.operators import Operators, MAX_VALUE
from core.token_system import Token, Line, SYMBOL_TO_TOKEN

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"[ \t\r\n]*")
_INTEGER = re.compile(r"([+-]?)0*([0-9]+)")
_MAX_DIGITS = len(str(MAX_VALUE))  # 超过该位数的字面量必然越界


class Parser:
    """
    逐个位置识别Token：先尝试带符号整数，再尝试单字符操作符
    因此 '-' 后紧跟数字时总是被当作负数字面量，而不是减号
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Line:
        line = Line()
        self._skip_whitespace()
        while self.pos < len(self.text):
            token = self._parse_number() or self._parse_operator()
            if token is None:
                logger.debug(f"Unrecognized input at {self.pos}: {self.text!r}")
                raise ParseFailure(self.text)
            line.append(token)
            self._skip_whitespace()
        return line

    def _skip_whitespace(self):
        self.pos = _WHITESPACE.match(self.text, self.pos).end()

    def _parse_number(self):
        match = _INTEGER.match(self.text, self.pos)
        if match is None:
            return None
        sign, digits = match.groups()
        # 字面量必须能放进定宽整数；先按位数过滤，避免转换超长字符串
        value = int(sign + digits) if len(digits) <= _MAX_DIGITS else None
        if value is None or not Operators.fits(value):
            logger.debug(f"Integer literal out of range: {match.group()[:32]}")
            return None
        self.pos = match.end()
        return Token.number(value)

    def _parse_operator(self):
        token = SYMBOL_TO_TOKEN.get(self.text[self.pos])
        if token is not None:
            self.pos += 1
        return token


def parse_line(text: str) -> Line:
    """解析整行；任何无法识别的字符都会让整行失败"""
    return Parser(text).parse()
