#!/usr/bin/env python3
"""
Laço interativo do interpretador BASIC no terminal.
"""
import logging
import sys

from config import Settings, configure_logging
from console import Console
from dispatcher import LineDispatcher
from errors import BasicError
from interpreter import Interpreter

logger = logging.getLogger(__name__)


def repl(console=None):
    """Lê e processa linhas até QUIT ou fim da entrada."""
    dispatcher = LineDispatcher(Interpreter(console=console))
    console = dispatcher.console

    while True:
        try:
            line = console.read_line()
            if not line.strip():
                continue
            if not dispatcher.process_line(line):
                break
        except BasicError as e:
            logger.info("%s: %s (linha %s)", type(e).__name__, e.detail, e.line)
            console.write_line(str(e))
        except EOFError:
            break
    return 0


def main():
    configure_logging(Settings.from_env())
    return repl(Console())


if __name__ == "__main__":
    sys.exit(main())
