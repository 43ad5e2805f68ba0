"""会话模块 - 持有栈并把每行输入交给解析器和求值器"""
from .session import Session

__all__ = ['Session']
