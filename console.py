import sys


class Console:
    """
    Entrada e saída do interpretador.

    Por padrão usa stdin/stdout; os testes e a API web injetam StringIO.
    """
    def __init__(self, input_stream=None, output_stream=None):
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def write(self, text):
        self.output_stream.write(text)
        self.output_stream.flush()

    def write_line(self, text):
        self.write(f"{text}\n")

    def read_line(self):
        line = self.input_stream.readline()
        if not line:
            raise EOFError("Fim da entrada")
        return line.rstrip('\r\n')
