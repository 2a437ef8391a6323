"""Error handling for the Bol language. Only BolErrors should be encountered while running a program: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class BolError(Exception):
    """Base class for every error the Bol pipeline raises. line is the 1-based source line (if known) and text is the
    offending source text, used to highlight the error in the diagnosis.
    """
    kind = "Error"

    def __init__(self, msg, line=None, text=None, diagnosis=True):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.text = text
        self.diagnosis = diagnosis

    def __str__(self):
        if self.line is not None:
            return f"[line {self.line}] {self.msg}"
        return self.msg


class LexError(BolError):
    """Malformed token stream: unterminated string or illegal character."""
    kind = "LexError"


class ParseError(BolError):
    """Token stream does not match the grammar."""
    kind = "ParseError"


class BolRuntimeError(BolError):
    """Well-formed program violated a dynamic rule. Reported as 'RuntimeError'."""
    kind = "RuntimeError"


class ErrorHandler:
    """Context manager that reports Bol errors in a readable form and flags any other error as internal."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream if stream is not None else sys.stderr
        self.sources = {}  # path: list of source lines
        self.path = None   # path of the source currently running

    def register_source(self, path, source):
        """Registers source under path so that errors can display the offending line. Should be called prior to
        running source.
        """
        self.sources[path] = source.split("\n")
        self.path = path

    def source_line(self, line_num):
        """Returns the registered source line line_num (1-based) of the current path, or None."""
        lines = self.sources.get(self.path)
        if not lines or line_num is None or not 1 <= line_num <= len(lines):
            return None
        return lines[line_num - 1]

    @staticmethod
    def diagnose(line, text=None):
        """Returns line with text highlighted and bolded, followed by a caret line underneath it."""
        line = line.rstrip()
        start = line.find(text) if text else -1
        if start == -1:
            return "  " + line

        end = start + max(len(text), 1)
        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def format(self, error, internal=False):
        """Returns the full (colored) report for error."""
        location = self.path or ""
        if location and error.line is not None:
            location += f":{error.line}"
        error_msg = colored(f"{location}: ", attrs=["bold"]) if location else ""

        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(f"{error.kind}: ", attrs=["bold"]) + error.msg

        line = self.source_line(error.line)
        if not internal and error.diagnosis and line is not None and line.strip():
            error_msg += "\n" + ErrorHandler.diagnose(line, error.text)

        return error_msg

    def throw(self, error, internal=False):
        """Reports error. If self.fatal, exits with status 1."""
        print(self.format(error, internal), file=self.stream)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(BolError("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(BolRuntimeError("maximum recursion depth exceeded", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, BolError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(BolError(f"unknown error: '{exc_type.__name__}: {exc_val}'"), internal=True)
            do_exit = True

        return not do_exit
