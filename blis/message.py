import json
import math
from decimal import Decimal
from typing import Optional

from blis.errors import ParseError


def format_result(value: float) -> str:
    """
    格式化计算结果：不使用科学计数法，整数不带小数部分，无穷和非数字用 inf / -inf / NaN 表示
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr 给出能还原该浮点数的最短数字串，再展开成定点形式
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class ResultMessage:
    expression: str
    echo: Optional[str]

    def to_dict(self) -> dict:
        raise NotImplementedError

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False)


class ValueMessage(ResultMessage):
    value: float

    def __init__(self, expression: str, value: float, echo: Optional[str] = None) -> None:
        self.expression = expression
        self.value = value
        self.echo = echo

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            # JSON 不能表示 inf 和 NaN，此时 result 为 null，message 中仍有文本形式
            "result": self.value if math.isfinite(self.value) else None,
            "error": None,
            "message": format_result(self.value),
            "echo": self.echo
        }


class ErrorMessage(ResultMessage):
    error: ParseError

    def __init__(self, expression: str, error: ParseError, echo: Optional[str] = None) -> None:
        self.expression = expression
        self.error = error
        self.echo = echo

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "result": None,
            "error": self.error.kind,
            "message": self.error.message,
            "echo": self.echo
        }


async def send_message(websocket, message: ResultMessage):
    await websocket.send(message.to_json())
