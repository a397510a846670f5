import logging

from errors import BasicSyntaxError
from interpreter import Interpreter
from lexer import Lexer, TokenType
from parser import Parser

logger = logging.getLogger(__name__)

IMMEDIATE_STATEMENTS = frozenset({TokenType.LET, TokenType.PRINT, TokenType.INPUT})


class LineDispatcher:
    """
    Decide o que fazer com cada linha digitada: guardar/apagar uma linha
    numerada, executar um comando do sistema (RUN, LIST, ...) ou executar
    imediatamente um LET, PRINT ou INPUT.
    """
    def __init__(self, interpreter=None):
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    @property
    def program(self):
        return self.interpreter.program

    @property
    def environment(self):
        return self.interpreter.environment

    @property
    def console(self):
        return self.interpreter.console

    def process_line(self, line):
        """Processa uma linha. Devolve False quando o usuário pede QUIT."""
        # O texto guardado para LIST é a linha como foi digitada
        text = line.rstrip('\r\n')
        tokens = Lexer(text).tokenize()
        first = tokens[0]

        if first.type == TokenType.EOF:
            return True

        if first.type == TokenType.NUMBER:
            self._store_line(first.value, text, tokens[1:])

        elif first.type == TokenType.RUN:
            self.interpreter.run()

        elif first.type == TokenType.LIST:
            for entry in self.program.entries():
                self.console.write_line(entry.source_text)

        elif first.type == TokenType.CLEAR:
            self.program.clear()
            self.environment.clear()
            logger.debug("Programa e variáveis apagados")

        elif first.type == TokenType.QUIT:
            return False

        elif first.type == TokenType.HELP:
            pass

        elif first.type in IMMEDIATE_STATEMENTS:
            statement = Parser(tokens).parse_statement()
            self.interpreter.execute(statement)

        else:
            raise BasicSyntaxError(f"Comando inválido: {first.value}", first.column)

        return True

    def _store_line(self, line_number, text, tokens):
        if line_number <= 0:
            raise BasicSyntaxError(f"Número de linha inválido: {line_number}", 1)

        if tokens[0].type == TokenType.EOF:
            self.program.remove_line(line_number)
            return

        self.program.add_or_replace_line(line_number, text)
        statement = Parser(tokens).parse_statement()
        self.program.set_parsed_statement(line_number, statement)
