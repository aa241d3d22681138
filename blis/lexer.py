from typing import Tuple

from blis.tokens import Token, TokenType


def skip_whitespace(expression: str, pos: int) -> int:
    while pos < len(expression) and expression[pos].isspace():
        pos += 1
    return pos


def is_digit(c: str) -> bool:
    # 只接受 ASCII 数字，"٣"、"²" 等字符按运算符处理
    return '0' <= c <= '9'


def get_operation(expression: str, pos: int) -> Tuple[str, int]:
    # 目前只支持单字符运算符，不在这里校验是否合法
    return expression[pos], pos + 1


def get_number(expression: str, pos: int) -> Tuple[str, int]:
    """
    读取连续的数字和小数点，"1.2.3" 这样的写法留给数值转换时报错
    """
    start: int = pos
    while pos < len(expression) and (is_digit(expression[pos]) or expression[pos] == '.'):
        pos += 1
    return expression[start:pos], pos


def get_token(expression: str, pos: int) -> Tuple[Token, int]:
    """
    从 pos 处读取一个标记

    标记之间的空白会被跳过，所以 "2 + 2" 与 "2+2" 等价，而 "2 2" 是两个数字
    :param expression: 表达式字符串
    :param pos: 当前读取位置
    :return: 标记和新的读取位置，到达末尾时返回 END 标记
    """
    pos = skip_whitespace(expression, pos)

    if pos >= len(expression):
        return Token(TokenType.END), pos

    if is_digit(expression[pos]):
        number, pos = get_number(expression, pos)
        return Token(TokenType.NUMBER, number), pos

    # 其他字符一律视为运算符（也可能是非法输入）
    operation, pos = get_operation(expression, pos)
    return Token(TokenType.OPERATION, operation), pos
