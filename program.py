import bisect
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ProgramEntry:
    line_number: int
    source_text: str
    statement: Optional[object] = None


class Program:
    """
    Guarda as linhas do programa ordenadas pelo número da linha.

    Cada entrada tem o texto digitado pelo usuário e, quando a linha pôde
    ser analisada, o comando já construído pelo parser.
    """
    def __init__(self):
        self.lines = {}
        self.line_numbers = []

    def add_or_replace_line(self, line_number, source_text):
        if line_number not in self.lines:
            bisect.insort(self.line_numbers, line_number)
        # O texto novo invalida o comando anterior da mesma linha
        self.lines[line_number] = ProgramEntry(line_number, source_text)
        logger.debug("Linha %d armazenada: %r", line_number, source_text)

    def remove_line(self, line_number):
        if self.lines.pop(line_number, None) is None:
            return
        index = bisect.bisect_left(self.line_numbers, line_number)
        del self.line_numbers[index]
        logger.debug("Linha %d removida", line_number)

    def set_parsed_statement(self, line_number, statement):
        try:
            self.lines[line_number].statement = statement
        except KeyError:
            raise KeyError(f"Linha {line_number} não existe no programa") from None

    def get_parsed_statement(self, line_number):
        entry = self.lines.get(line_number)
        return entry.statement if entry else None

    def get_source_text(self, line_number):
        entry = self.lines.get(line_number)
        return entry.source_text if entry else None

    def has_line(self, line_number):
        return self.get_source_text(line_number) is not None

    def first_line(self):
        return self.line_numbers[0] if self.line_numbers else None

    def next_line(self, line_number):
        index = bisect.bisect_right(self.line_numbers, line_number)
        if index < len(self.line_numbers):
            return self.line_numbers[index]
        return None

    def entries(self):
        for line_number in self.line_numbers:
            yield self.lines[line_number]

    def clear(self):
        self.lines.clear()
        self.line_numbers.clear()

    def __len__(self):
        return len(self.line_numbers)
