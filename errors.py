class BasicError(Exception):
    """Base para todos os erros reportados ao usuário do interpretador."""
    message = "ERROR"
    line = None

    def __init__(self, detail=None):
        super().__init__(self.message)
        self.detail = detail

    def __str__(self):
        return self.message


class BasicSyntaxError(BasicError, SyntaxError):
    message = "SYNTAX ERROR"

    def __init__(self, detail=None, column=None):
        super().__init__(detail)
        self.column = column


class LineNumberError(BasicError):
    message = "LINE NUMBER ERROR"


class UndefinedVariable(BasicError):
    message = "VARIABLE NOT DEFINED"


class DivisionByZero(BasicError):
    message = "DIVIDE BY ZERO"


class ExecutionLimitExceeded(BasicError):
    message = "EXECUTION LIMIT EXCEEDED"
