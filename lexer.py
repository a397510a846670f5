from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    NUMBER = auto()
    ID = auto()
    REM = auto()
    LET = auto()
    PRINT = auto()
    INPUT = auto()
    GOTO = auto()
    IF = auto()
    THEN = auto()
    END = auto()
    RUN = auto()
    LIST = auto()
    CLEAR = auto()
    QUIT = auto()
    HELP = auto()
    OP_ARITH = auto()
    OP_REL = auto()
    LPAREN = auto()
    RPAREN = auto()
    UNKNOWN = auto()
    EOF = auto()


KEYWORDS = {
    'REM': TokenType.REM,
    'LET': TokenType.LET,
    'PRINT': TokenType.PRINT,
    'INPUT': TokenType.INPUT,
    'GOTO': TokenType.GOTO,
    'IF': TokenType.IF,
    'THEN': TokenType.THEN,
    'END': TokenType.END,
    'RUN': TokenType.RUN,
    'LIST': TokenType.LIST,
    'CLEAR': TokenType.CLEAR,
    'QUIT': TokenType.QUIT,
    'HELP': TokenType.HELP,
}

DIGITS = '0123456789'


@dataclass
class Token:
    type: TokenType
    value: object
    column: int


class Lexer:
    """
    Divide uma única linha digitada pelo usuário em tokens.

    O lexer nunca falha: caracteres que não pertencem à linguagem viram
    tokens UNKNOWN e cabe ao parser rejeitá-los. Assim uma linha numerada
    com erro de sintaxe ainda pode ser guardada no programa.
    """
    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.current_char = self.source[0] if source else None

    @property
    def column(self):
        return self.pos + 1

    def advance(self):
        self.pos += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self):
        while self.current_char and self.current_char.isspace():
            self.advance()

    def number(self):
        start_pos = self.pos
        while self.current_char and self.current_char in DIGITS:
            self.advance()
        return int(self.source[start_pos:self.pos])

    def identifier(self):
        start_pos = self.pos
        while self.current_char and (self.current_char.isalnum() or self.current_char == '_'):
            self.advance()
        return self.source[start_pos:self.pos]

    def comment(self):
        """Consome o restante da linha após REM."""
        text = self.source[self.pos:].strip()
        self.pos = len(self.source)
        self.current_char = None
        return text

    def tokenize(self):
        tokens = []

        while self.current_char:
            start_column = self.column

            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char.isalpha():
                word = self.identifier()
                token_type = KEYWORDS.get(word, TokenType.ID)
                if token_type == TokenType.REM:
                    tokens.append(Token(TokenType.REM, self.comment(), start_column))
                else:
                    tokens.append(Token(token_type, word, start_column))
                continue

            if self.current_char in DIGITS:
                tokens.append(Token(TokenType.NUMBER, self.number(), start_column))
                continue

            if self.current_char in '+-*/':
                tokens.append(Token(TokenType.OP_ARITH, self.current_char, start_column))
                self.advance()
                continue

            if self.current_char in '=<>':
                tokens.append(Token(TokenType.OP_REL, self.current_char, start_column))
                self.advance()
                continue

            if self.current_char == '(':
                tokens.append(Token(TokenType.LPAREN, '(', start_column))
                self.advance()
                continue

            if self.current_char == ')':
                tokens.append(Token(TokenType.RPAREN, ')', start_column))
                self.advance()
                continue

            tokens.append(Token(TokenType.UNKNOWN, self.current_char, start_column))
            self.advance()

        tokens.append(Token(TokenType.EOF, None, self.column))
        return tokens
