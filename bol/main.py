"""Command-line front end for the Bol interpreter: runs .bol files or starts the interactive shell. Uses the error
handling context manager so that any error is reported once and exits with status 1.
"""

import argparse
import os
import sys

from termcolor import colored

from bol.lang.error import BolError, ErrorHandler
from bol.lang.session import Session
from bol.lang.shell import Shell


__version__ = "1.0.0"


def build_parser():
    parser = argparse.ArgumentParser(prog="bol", description="Bol interpreter :: Python backend")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="execute a Bol program")
    run.add_argument("file", help=f"program to run (must end in '{Session.EXTENSION}')")

    commands.add_parser("shell", help="start the interactive shell")

    return parser


def check_file(path):
    """Raises BolError if path cannot be a runnable Bol program."""
    if not path.endswith(Session.EXTENSION):
        msg = f"wrong file extension: '{os.path.basename(path)}' (Bol programs end in '{Session.EXTENSION}')"
        raise BolError(msg, diagnosis=False)
    if not os.path.isfile(path):
        raise BolError(f"file not found: '{os.path.abspath(path)}'", diagnosis=False)


def main(argv=None):
    """Runs the Bol interpreter. Called from the bol console script."""
    args = build_parser().parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.command == "run":
            check_file(args.file)
            Session(error_handler, os.path.abspath(args.file)).run()

        elif args.command == "shell":
            Shell(Session(error_handler, Session.SH_FILE, interactive=True)).cmdloop()

        else:
            build_parser().print_help()
            print("\n" + colored("example:", attrs=["bold"]) + " bol run programs/factorial.bol")

    return 0


if __name__ == "__main__":
    sys.exit(main())
