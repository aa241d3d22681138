import math
import operator
from typing import Callable

from blis.errors import InvalidOperation

# 左括号优先级为 -1，不会被其他运算符弹出，只能由右括号弹出
# 数值越大优先级越低：进入的运算符优先级数值 >= 栈顶时，先计算栈顶
priority: dict[str, int] = {'(': -1, '*': 1, '/': 1, '+': 2, '-': 2}


def divide(b: float, a: float) -> float:
    # 除零按浮点语义处理：x/0 得到 ±inf，0/0 得到 nan，不视为错误
    if a == 0:
        if b == 0 or math.isnan(b):
            return math.nan
        return math.copysign(math.inf, b) * math.copysign(1.0, a)
    return b / a


operations: dict[str, Callable[[float, float], float]] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': divide,
}


def get_priority(symbol: str) -> int:
    if symbol not in priority:
        raise InvalidOperation(f"未知运算符: {symbol}")
    return priority[symbol]


def apply_operation(symbol: str, b: float, a: float) -> float:
    """
    计算 b <symbol> a

    出栈顺序与入栈相反，所以左操作数是 b，右操作数是 a
    """
    if symbol not in operations:
        raise InvalidOperation(f"未知运算符: {symbol}")
    return operations[symbol](b, a)
