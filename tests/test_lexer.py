"""
Tests for the single-line lexer.
"""

from lexer import Lexer, TokenType


def types(source):
    return [token.type for token in Lexer(source).tokenize()]


def values(source):
    return [token.value for token in Lexer(source).tokenize()]


class TestTokens:

    def test_empty_line_is_only_eof(self):
        assert types("") == [TokenType.EOF]
        assert types("   ") == [TokenType.EOF]

    def test_numbered_let(self):
        assert types("10 LET x = 5") == [
            TokenType.NUMBER, TokenType.LET, TokenType.ID,
            TokenType.OP_REL, TokenType.NUMBER, TokenType.EOF,
        ]
        assert values("10 LET x = 5") == [10, "LET", "x", "=", 5, None]

    def test_arithmetic_and_parentheses(self):
        assert types("(a+1)*2/b-c") == [
            TokenType.LPAREN, TokenType.ID, TokenType.OP_ARITH, TokenType.NUMBER,
            TokenType.RPAREN, TokenType.OP_ARITH, TokenType.NUMBER,
            TokenType.OP_ARITH, TokenType.ID, TokenType.OP_ARITH, TokenType.ID,
            TokenType.EOF,
        ]

    def test_commands_are_keywords(self):
        for word in ("RUN", "LIST", "CLEAR", "QUIT", "HELP"):
            assert types(word)[0] == TokenType[word]

    def test_keywords_are_case_sensitive(self):
        assert types("print")[0] == TokenType.ID

    def test_identifier_with_digits_and_underscore(self):
        tokens = Lexer("total_2").tokenize()
        assert tokens[0].type == TokenType.ID
        assert tokens[0].value == "total_2"

    def test_keyword_prefix_is_identifier(self):
        assert types("REMARK")[0] == TokenType.ID
        assert types("ENDING")[0] == TokenType.ID


class TestComments:

    def test_rem_swallows_rest_of_line(self):
        tokens = Lexer("20 REM this is * not ( tokenized").tokenize()
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.REM, TokenType.EOF]
        assert tokens[1].value == "this is * not ( tokenized"

    def test_bare_rem(self):
        tokens = Lexer("REM").tokenize()
        assert tokens[0].type == TokenType.REM
        assert tokens[0].value == ""


class TestUnknownCharacters:

    def test_unknown_characters_do_not_raise(self):
        tokens = Lexer("PRINT 1 $ 2").tokenize()
        assert TokenType.UNKNOWN in [t.type for t in tokens]
        assert tokens[2].value == "$"

    def test_columns_are_one_based(self):
        tokens = Lexer("  LET a").tokenize()
        assert tokens[0].column == 3
        assert tokens[1].column == 7
