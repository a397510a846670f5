from errors import UndefinedVariable


class Environment:
    """Tabela de variáveis: nome -> valor inteiro. Não há valor padrão."""

    def __init__(self):
        self.variables = {}

    def get(self, name):
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedVariable(f"variável '{name}' não definida") from None

    def set(self, name, value):
        self.variables[name] = value

    def clear(self):
        self.variables.clear()

    def snapshot(self):
        return dict(self.variables)

    def __contains__(self, name):
        return name in self.variables

    def __len__(self):
        return len(self.variables)
