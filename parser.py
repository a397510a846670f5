from lexer import TokenType
from basic_ast import *
from errors import BasicSyntaxError


class Parser:
    """
    Analisador descendente recursivo para um único comando.

    Gramática das expressões:
        expression := term (('+' | '-') term)*
        term       := factor (('*' | '/') factor)*
        factor     := '-' factor | '(' expression ')' | NUMBER | ID
    """
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.current_token = tokens[0] if tokens else None

    def advance(self):
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None

    def at(self, token_type, value=None):
        if not self.current_token or self.current_token.type != token_type:
            return False
        return value is None or self.current_token.value == value

    def error(self, message):
        column = self.current_token.column if self.current_token else None
        return BasicSyntaxError(f"Coluna {column if column else '?'} - {message}", column)

    def expect(self, token_type, value=None):
        if not self.at(token_type):
            current_name = self.current_token.type.name if self.current_token else None
            raise self.error(f"Esperado {token_type.name}, encontrado {current_name}")
        if value is not None and self.current_token.value != value:
            raise self.error(f"Esperado '{value}', encontrado '{self.current_token.value}'")
        token = self.current_token
        self.advance()
        return token

    def expect_end(self):
        if not self.at(TokenType.EOF):
            raise self.error(f"Texto inesperado após o comando: '{self.current_token.value}'")

    def parse_expression(self):
        left = self.parse_term()
        while self.at(TokenType.OP_ARITH, '+') or self.at(TokenType.OP_ARITH, '-'):
            op = self.current_token.value
            self.advance()
            left = BinaryOp(left, op, self.parse_term())
        return left

    def parse_term(self):
        left = self.parse_factor()
        while self.at(TokenType.OP_ARITH, '*') or self.at(TokenType.OP_ARITH, '/'):
            op = self.current_token.value
            self.advance()
            left = BinaryOp(left, op, self.parse_factor())
        return left

    def parse_factor(self):
        if self.at(TokenType.OP_ARITH, '-'):
            self.advance()
            return BinaryOp(Constant(0), '-', self.parse_factor())

        if self.at(TokenType.LPAREN):
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenType.RPAREN)
            return expr

        if self.at(TokenType.NUMBER):
            value = self.current_token.value
            self.advance()
            return Constant(value)

        if self.at(TokenType.ID):
            name = self.current_token.value
            self.advance()
            return Variable(name)

        found = f"{self.current_token.type.name}('{self.current_token.value}')" if self.current_token else "None"
        raise self.error(f"Expressão inválida: encontrado {found}, esperado NUMBER ou ID")

    def parse_variable_name(self):
        # Palavras reservadas nunca chegam como ID, então são rejeitadas aqui
        return self.expect(TokenType.ID).value

    def parse_statement(self):
        """Analisa um comando a partir da palavra-chave atual até o fim da linha."""
        try:
            return self._parse_statement()
        except RecursionError:
            raise self.error("Expressão aninhada demais") from None

    def _parse_statement(self):
        if self.at(TokenType.REM):
            comment = self.current_token.value
            self.advance()
            statement = RemStatement(comment)

        elif self.at(TokenType.LET):
            self.advance()
            var = self.parse_variable_name()
            self.expect(TokenType.OP_REL, '=')
            statement = LetStatement(var, self.parse_expression())

        elif self.at(TokenType.PRINT):
            self.advance()
            statement = PrintStatement(self.parse_expression())

        elif self.at(TokenType.INPUT):
            self.advance()
            statement = InputStatement(self.parse_variable_name())

        elif self.at(TokenType.GOTO):
            self.advance()
            statement = GotoStatement(self.expect(TokenType.NUMBER).value)

        elif self.at(TokenType.IF):
            self.advance()
            left = self.parse_expression()
            op = self.expect(TokenType.OP_REL).value
            right = self.parse_expression()
            self.expect(TokenType.THEN)
            target = self.expect(TokenType.NUMBER).value
            statement = IfStatement(left, op, right, target)

        elif self.at(TokenType.END):
            self.advance()
            statement = EndStatement()

        else:
            value = self.current_token.value if self.current_token else None
            raise self.error(f"Comando inválido: {value}")

        self.expect_end()
        return statement
