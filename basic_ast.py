from dataclasses import dataclass


# --- Expressões ---

@dataclass(frozen=True)
class Constant:
    value: int

@dataclass(frozen=True)
class Variable:
    name: str

@dataclass(frozen=True)
class BinaryOp:
    left: object
    op: str
    right: object


# --- Comandos ---

@dataclass(frozen=True)
class RemStatement:
    comment: str = ''

@dataclass(frozen=True)
class LetStatement:
    var: str
    expr: object

@dataclass(frozen=True)
class PrintStatement:
    expr: object

@dataclass(frozen=True)
class InputStatement:
    var: str

@dataclass(frozen=True)
class GotoStatement:
    target: int

@dataclass(frozen=True)
class IfStatement:
    left: object
    op: str
    right: object
    target: int

@dataclass(frozen=True)
class EndStatement:
    pass


# --- Sinais de controle devolvidos pela execução de um comando ---

@dataclass(frozen=True)
class Continue:
    pass

@dataclass(frozen=True)
class JumpTo:
    line: int

@dataclass(frozen=True)
class Halt:
    pass


CONTINUE = Continue()
HALT = Halt()
