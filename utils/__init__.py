"""工具模块"""
from .formatting import format_value, render

__all__ = ['format_value', 'render']
