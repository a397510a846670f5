import logging
import re

from basic_ast import *
from console import Console
from environment import Environment
from errors import BasicError, DivisionByZero, ExecutionLimitExceeded, LineNumberError
from program import Program

logger = logging.getLogger(__name__)

INTEGER_INPUT = re.compile(r'\s*[+-]?\d+\s*')
PROMPT = ' ? '


class Interpreter:
    """
    Executa comandos contra a tabela de variáveis e o programa armazenado.

    Cada comando devolve um sinal de controle (CONTINUE, JumpTo ou HALT)
    que o laço de RUN consome para decidir a próxima linha.
    """
    def __init__(self, program=None, environment=None, console=None, max_steps=None):
        self.program = program if program is not None else Program()
        self.environment = environment if environment is not None else Environment()
        self.console = console if console is not None else Console()
        self.max_steps = max_steps
        self.current_line = None

    def evaluate(self, expr):
        """
        Avalia a expressão com uma pilha explícita em vez de recursão, para
        que somas longas como 1+1+...+1 não estourem a pilha do Python.
        O operando esquerdo é sempre avaliado antes do direito.
        """
        values = []
        pending = [expr]
        while pending:
            node = pending.pop()
            if isinstance(node, _Apply):
                right_val = values.pop()
                left_val = values.pop()
                values.append(self.apply_operator(node.op, left_val, right_val))
            elif isinstance(node, Constant):
                values.append(node.value)
            elif isinstance(node, Variable):
                values.append(self.environment.get(node.name))
            elif isinstance(node, BinaryOp):
                pending.append(_Apply(node.op))
                pending.append(node.right)
                pending.append(node.left)
            else:
                raise TypeError(f"Tipo de expressão inválido: {type(node).__name__}")
        return values.pop()

    def apply_operator(self, op, left_val, right_val):
        if op == '+': return left_val + right_val
        if op == '-': return left_val - right_val
        if op == '*': return left_val * right_val
        if op == '/':
            if right_val == 0:
                raise DivisionByZero(f"{left_val} / 0")
            return _truncating_div(left_val, right_val)
        raise ValueError(f"Operador desconhecido: {op}")

    def evaluate_condition(self, left, op, right):
        left_val = self.evaluate(left)
        right_val = self.evaluate(right)

        if op == '=': return left_val == right_val
        if op == '<': return left_val < right_val
        if op == '>': return left_val > right_val
        raise ValueError(f"Operador relacional inválido: {op}")

    def jump(self, target):
        # Uma linha com texto mas sem comando válido também é destino aceito
        if not self.program.has_line(target):
            raise LineNumberError(f"linha {target} não existe")
        return JumpTo(target)

    def execute(self, stmt):
        if isinstance(stmt, RemStatement):
            return CONTINUE

        elif isinstance(stmt, LetStatement):
            self.environment.set(stmt.var, self.evaluate(stmt.expr))
            return CONTINUE

        elif isinstance(stmt, PrintStatement):
            self.console.write_line(str(self.evaluate(stmt.expr)))
            return CONTINUE

        elif isinstance(stmt, InputStatement):
            self.environment.set(stmt.var, self.read_integer())
            return CONTINUE

        elif isinstance(stmt, GotoStatement):
            return self.jump(stmt.target)

        elif isinstance(stmt, IfStatement):
            if self.evaluate_condition(stmt.left, stmt.op, stmt.right):
                return self.jump(stmt.target)
            return CONTINUE

        elif isinstance(stmt, EndStatement):
            return HALT

        else:
            raise TypeError(f"Comando desconhecido: {type(stmt).__name__}")

    def read_integer(self):
        """Pede um número até receber um inteiro válido."""
        while True:
            self.console.write(PROMPT)
            text = self.console.read_line()
            if INTEGER_INPUT.fullmatch(text):
                return int(text)
            self.console.write_line("INVALID NUMBER")

    def run(self):
        steps = 0
        self.current_line = self.program.first_line()
        logger.debug("RUN iniciado na linha %s", self.current_line)
        try:
            while self.current_line is not None:
                if self.max_steps is not None and steps >= self.max_steps:
                    raise ExecutionLimitExceeded(
                        f"{steps} comandos executados, parado na linha {self.current_line}"
                    )
                steps += 1

                stmt = self.program.get_parsed_statement(self.current_line)
                signal = CONTINUE if stmt is None else self.execute(stmt)

                if isinstance(signal, Halt):
                    break
                elif isinstance(signal, JumpTo):
                    logger.debug("Desvio da linha %d para %d", self.current_line, signal.line)
                    self.current_line = signal.line
                else:
                    self.current_line = self.program.next_line(self.current_line)
        except BasicError as error:
            error.line = self.current_line
            raise
        finally:
            logger.debug("RUN terminado após %d comandos", steps)
            self.current_line = None


class _Apply:
    """Marca na pilha de avaliação: aplicar op aos dois últimos valores."""
    __slots__ = ('op',)

    def __init__(self, op):
        self.op = op


def _truncating_div(left, right):
    """Divisão inteira truncando em direção a zero, como em C."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient
