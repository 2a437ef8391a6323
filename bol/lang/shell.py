"""Handles interactive mode for the Bol interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Bol interpreter shell."""
    intro = "Bol interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for unclosed blocks
    _tmp_prompt = "> "       # also used for prompt swapping in unclosed blocks
    commands = ("help", "?", "exit", "EOF")  # anything else is Bol source, even "exit = 1"

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_lines = []

    def onecmd(self, line):
        """Dispatches line to a do_* method only if it is exactly a shell command."""
        command = line.strip()
        if command in self.commands:
            return super().onecmd(command)
        elif not command:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Executes arbitrary Bol statements."""
        self._tmp_lines.append(line)
        text = "\n".join(self._tmp_lines)

        if self.sess.needs_more(text):
            self.prompt = self.secondary_prompt
            return

        self._tmp_lines = []
        self.prompt = self._tmp_prompt

        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.add(text)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the Bol interpreter!\n\n"
              "Type statements without 'bola saheb'/'yeto saheb': they run immediately and\n"
              "everything you declare stays available for the rest of the session.\n\n"
              "Try it out by typing 'he ghe x = 10', then 'he bol x * 2'. Blocks can span\n"
              "several lines: the prompt changes to '. ' until every '{' is closed.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._tmp_lines:
            self._tmp_lines.append("")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
