import json
import math
import unittest

from blis.errors import BadExpression, InvalidOperation
from blis.message import ErrorMessage, ValueMessage, format_result


class TestFormatResult(unittest.TestCase):
    def test_integer(self):
        self.assertEqual("4", format_result(4.0))
        self.assertEqual("-5", format_result(-5.0))
        self.assertEqual("0", format_result(0.0))

    def test_fraction(self):
        self.assertEqual("0.5", format_result(0.5))
        self.assertEqual("2.75", format_result(2.75))

    def test_special_values(self):
        self.assertEqual("inf", format_result(math.inf))
        self.assertEqual("-inf", format_result(-math.inf))
        self.assertEqual("NaN", format_result(math.nan))

    def test_no_exponent(self):
        """测试大数和小数不使用科学计数法"""
        self.assertEqual("100000000000000000000", format_result(1e20))
        self.assertEqual("0.0000001", format_result(1e-7))
        self.assertEqual("0.1", format_result(0.1))

    def test_negative_zero(self):
        self.assertEqual("-0", format_result(-0.0))


class TestMessages(unittest.TestCase):
    def test_value_message(self):
        message = ValueMessage("2+2", 4.0, echo="abc")
        self.assertEqual({
            "expression": "2+2",
            "result": 4.0,
            "error": None,
            "message": "4",
            "echo": "abc"
        }, json.loads(message.to_json()))

    def test_non_finite_value_is_valid_json(self):
        """测试 inf 和 NaN 的结果仍是标准JSON"""
        def reject(constant):
            raise ValueError(f"非标准JSON常量: {constant}")

        for value, text in ((math.inf, "inf"), (-math.inf, "-inf"), (math.nan, "NaN")):
            reply = json.loads(ValueMessage("x", value).to_json(), parse_constant=reject)
            self.assertIsNone(reply["result"])
            self.assertEqual(text, reply["message"])

    def test_error_message(self):
        message = ErrorMessage("2+", BadExpression("缺少右操作数"))
        self.assertEqual({
            "expression": "2+",
            "result": None,
            "error": "BadExpression",
            "message": "Bad expression",
            "echo": None
        }, message.to_dict())

    def test_error_kind(self):
        error = InvalidOperation("未知运算符: $")
        self.assertEqual("InvalidOperation", error.kind)
        self.assertEqual("Invalid operation", error.message)
        self.assertEqual("未知运算符: $", str(error))


if __name__ == "__main__":
    unittest.main(verbosity=2)
