"""Session control for the Bol language. Runs a .bol file, or in interactive mode keeps one interpreter alive so that
declarations persist between inputs.
"""

from bol.lang.error import BolError
from bol.lang.interpreter import Interpreter
from bol.lang.lexer import tokenize
from bol.lang.parser import Parser


class Session:
    """Governs a Bol session: one global scope shared by everything run through it."""
    SH_FILE = "<in>"  # interactive-mode filename
    EXTENSION = ".bol"

    def __init__(self, error_handler, path, interactive=False, output=None):
        self.error_handler = error_handler
        self.path = path                # used for error messages
        self.interactive = interactive  # whether or not in interactive mode

        self.interpreter = Interpreter(output)
        self.source = ""

        if self.interactive:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    self.source = file.read()
            except OSError:
                raise BolError(f"'{path}' could not be opened", diagnosis=False)

            self.error_handler.register_source(path, self.source)

        elif not interactive:
            raise BolError(f"'{Session.SH_FILE}' is a reserved filename", diagnosis=False)

    @staticmethod
    def needs_more(text):
        """Whether or not text has unclosed braces, i.e. the shell should keep reading lines."""
        return text.count("{") > text.count("}")

    def run(self):
        """Runs this session's file. Will raise any errors that are encountered."""
        program = Parser(tokenize(self.source)).parse()
        self.interpreter.run(program)

    def add(self, text):
        """Runs text (statements without program markers) in this session's global scope."""
        self.error_handler.register_source(self.path, text)

        program = Parser(tokenize(text)).parse_fragment()
        self.interpreter.run(program)
