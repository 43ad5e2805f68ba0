"""配置文件"""
import logging

# 数值参数
CALCULATOR_CONFIG = {
    "integer_bits": 64,  # 分子/分母的有符号整数位宽
    "exponent_bits": 32,  # ^ 指数的有符号整数位宽
}

# 交互会话参数
SESSION_CONFIG = {
    "prompt": "> ",
    "exit_command": "exit",
    "parse_error_message": "Parsing Error!",
    "underflow_message": "Not enough items in stack!",
    "math_error_message": "Math Error!",
}

# 日志参数
LOGGING_CONFIG = {
    "level": logging.WARNING,  # 交互模式下默认不输出调试信息
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["integer_bits"] == 64, "分子/分母使用64位整数"
    assert CALCULATOR_CONFIG["exponent_bits"] <= CALCULATOR_CONFIG["integer_bits"], "指数位宽不能超过整数位宽"
    assert SESSION_CONFIG["exit_command"], "退出命令不能为空"
    return True
