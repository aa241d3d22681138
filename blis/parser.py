import logging
from typing import List

from blis.errors import BadExpression, InvalidOperation, OperationBalance, PopFailure
from blis.lexer import get_token
from blis.operations import apply_operation, get_priority
from blis.tokens import Token, TokenType


class Parser:
    """
    算术表达式求值器

    使用调度场算法，边读取标记边计算，维护数字栈和运算符栈。
    同一个实例可以依次计算多个表达式，每次计算前都会清空两个栈；
    两个栈没有加锁，不能在多个线程间共享。
    """
    numbers: List[float]
    operations: List[str]

    def __init__(self) -> None:
        self.numbers = []
        self.operations = []

    def calculate(self, origin_expression: str) -> float:
        """
        计算算术表达式的值
        :param origin_expression: 中缀表达式字符串，可以包含空白
        :return: 计算结果
        :raises ParseError: 表达式不合法
        """
        # 整个表达式外面套一层括号，最后的右括号会把运算符栈全部弹出
        expression: str = f"({origin_expression})"

        # 初始的前一个标记不是左括号，不会触发一元运算符处理
        prev_token: Token = Token(TokenType.OPERATION, "X")
        pos: int = 0

        self.numbers.clear()
        self.operations.clear()

        while True:
            token, pos = get_token(expression, pos)

            # 一元正负号：前一个标记是左括号时先压入 0，例如 4+(-1)*(2+2) 变成 4+(0-1)*(2+2)
            if (token.is_operation('+') or token.is_operation('-')) and prev_token.is_operation('('):
                self.numbers.append(0.0)

            if token.is_number():
                try:
                    number = float(token.value)
                except ValueError as e:
                    raise BadExpression(f"无法解析的数字: {token.value}") from e
                self.numbers.append(number)

            if token.is_operation():
                op = token.value
                if op == ')':
                    # 右括号前面是运算符，例如 "2+"，说明缺少右操作数
                    if prev_token.is_operation() and prev_token.value not in "()":
                        raise BadExpression(f"运算符 {prev_token.value} 缺少右操作数")

                    # 弹出到第一个左括号为止
                    while self.operations and self.operations[-1] != '(':
                        self._pop_operation()

                    if not self.operations:
                        raise BadExpression("括号不匹配")
                    # 弹出左括号
                    self.operations.pop()
                else:
                    while self._can_pop_operation(op):
                        self._pop_operation()

                    self.operations.append(op)

            prev_token = token

            if token.is_end():
                break

        if len(self.numbers) > 1 or len(self.operations) > 0:
            raise BadExpression("表达式格式错误")

        # 数字栈中应该只剩下一个数，即计算结果
        if not self.numbers:
            raise BadExpression("表达式为空")
        result = self.numbers.pop()
        logging.debug(f"计算 {origin_expression!r} = {result}")
        return result

    def _can_pop_operation(self, operation: str) -> bool:
        if not self.operations:
            return False

        try:
            prior1 = get_priority(operation)
            prior2 = get_priority(self.operations[-1])
        except InvalidOperation:
            # 未知运算符在这里不报错，等到真正计算时才报错
            return False

        # 左括号的优先级为 -1，只能由右括号弹出
        return prior1 >= 0 and prior2 >= 0 and prior1 >= prior2

    def _pop_number(self) -> float:
        if not self.numbers:
            raise OperationBalance("操作数不足")
        return self.numbers.pop()

    def _pop_operation(self) -> None:
        """
        弹出两个数字和一个运算符，计算后把结果压回数字栈
        """
        # 出栈顺序与入栈相反，先弹出的是右操作数
        a = self._pop_number()
        b = self._pop_number()

        if not self.operations:
            raise PopFailure("运算符栈为空")
        operation = self.operations.pop()

        self.numbers.append(apply_operation(operation, b, a))


def calculate(expression: str) -> float:
    """
    使用新的求值器计算表达式的值
    """
    return Parser().calculate(expression)
