from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    END = "end"
    NUMBER = "number"
    OPERATION = "operation"


@dataclass
class Token:
    """
    表达式中的最小单元：数字、单字符运算符或结束标记
    """
    type: TokenType
    value: str = ""

    def is_end(self) -> bool:
        return self.type == TokenType.END

    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    def is_operation(self, symbol: Optional[str] = None) -> bool:
        if self.type != TokenType.OPERATION:
            return False
        return symbol is None or self.value == symbol

    def __str__(self) -> str:
        if self.is_end():
            return "Token(END)"
        return f"Token({self.type.name}, {self.value!r})"
