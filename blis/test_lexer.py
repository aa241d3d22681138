import unittest

from blis.lexer import get_token
from blis.tokens import Token, TokenType


def tokenize(expression: str) -> list[Token]:
    tokens = []
    pos = 0
    while True:
        token, pos = get_token(expression, pos)
        tokens.append(token)
        if token.is_end():
            return tokens


class TestLexer(unittest.TestCase):
    def test_tokens(self):
        """测试分词: (2+3.5)*4"""
        expected = [
            Token(TokenType.OPERATION, "("),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.OPERATION, "+"),
            Token(TokenType.NUMBER, "3.5"),
            Token(TokenType.OPERATION, ")"),
            Token(TokenType.OPERATION, "*"),
            Token(TokenType.NUMBER, "4"),
            Token(TokenType.END),
        ]
        self.assertEqual(expected, tokenize("(2+3.5)*4"))

    def test_end_does_not_advance(self):
        token, pos = get_token("12", 2)
        self.assertTrue(token.is_end())
        self.assertEqual(2, pos)

    def test_number_advances_position(self):
        token, pos = get_token("123+4", 0)
        self.assertEqual(Token(TokenType.NUMBER, "123"), token)
        self.assertEqual(3, pos)

    def test_multiple_dots_are_kept(self):
        """测试多个小数点的数字不在分词时报错: 1.2.3"""
        token, pos = get_token("1.2.3", 0)
        self.assertEqual(Token(TokenType.NUMBER, "1.2.3"), token)
        self.assertEqual(5, pos)

    def test_leading_dot_is_operation(self):
        token, _ = get_token(".5", 0)
        self.assertEqual(Token(TokenType.OPERATION, "."), token)

    def test_unknown_character_is_operation(self):
        token, pos = get_token("x1", 0)
        self.assertTrue(token.is_operation("x"))
        self.assertEqual(1, pos)

    def test_non_ascii_digits_are_operations(self):
        """测试非 ASCII 数字字符按运算符处理: ٣ ²"""
        self.assertEqual(Token(TokenType.OPERATION, "٣"), get_token("٣+1", 0)[0])
        self.assertEqual(Token(TokenType.OPERATION, "²"), get_token("²", 0)[0])

    def test_whitespace_is_skipped(self):
        """测试空白被跳过: 2 + 2"""
        self.assertEqual(tokenize("2+2"), tokenize(" 2 +\t2 "))

    def test_whitespace_separates_numbers(self):
        """测试空白分隔的两个数字: 2 2"""
        self.assertEqual([
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.END),
        ], tokenize("2 2"))

    def test_token_helpers(self):
        token = Token(TokenType.OPERATION, "(")
        self.assertTrue(token.is_operation())
        self.assertTrue(token.is_operation("("))
        self.assertFalse(token.is_operation(")"))
        self.assertFalse(token.is_number())
        self.assertEqual("Token(OPERATION, '(')", str(token))
        self.assertEqual("Token(END)", str(Token(TokenType.END)))


if __name__ == "__main__":
    unittest.main(verbosity=2)
