"""
Pytest fixtures for the BASIC interpreter tests.
"""

from io import StringIO

import pytest

from console import Console
from dispatcher import LineDispatcher
from interpreter import Interpreter


class ScriptedConsole(Console):
    """Console fed from a list of input lines, collecting output in memory."""

    def __init__(self, inputs=()):
        super().__init__(StringIO("".join(f"{line}\n" for line in inputs)), StringIO())

    def feed(self, *lines):
        position = self.input_stream.tell()
        self.input_stream.seek(0, 2)
        self.input_stream.write("".join(f"{line}\n" for line in lines))
        self.input_stream.seek(position)

    @property
    def output(self):
        return self.output_stream.getvalue()

    def output_lines(self):
        return self.output.splitlines()


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def interpreter(console):
    return Interpreter(console=console)


@pytest.fixture
def dispatcher(interpreter):
    return LineDispatcher(interpreter)


@pytest.fixture
def enter(dispatcher):
    """Process several input lines in order, like a user typing them."""
    def _enter(*lines):
        result = True
        for line in lines:
            result = dispatcher.process_line(line)
        return result
    return _enter
