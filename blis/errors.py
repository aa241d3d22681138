class ParseError(ValueError):
    """
    表达式求值失败的基类

    每个子类对应一种错误类型，message 为交互界面展示给用户的文本
    """
    message: str = "Parse error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    @property
    def kind(self) -> str:
        return type(self).__name__


class BadExpression(ParseError):
    """括号不匹配、操作数多余或数字无法解析"""
    message = "Bad expression"


class InvalidOperation(ParseError):
    """查询优先级或执行运算时遇到未知的运算符"""
    message = "Invalid operation"


class OperationBalance(ParseError):
    """执行运算时操作数不足"""
    message = "Parse error"


class PopFailure(ParseError):
    """执行运算时运算符栈为空"""
    message = "Parse error"
