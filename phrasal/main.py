"""Runs phrasal programs from a file or typed in command-line mode, using the error handling context manager. Called
from the phrasal console script.
"""

import argparse
import logging
import sys

from phrasal.lang.error import ErrorHandler
from phrasal.lang.session import Session
from phrasal.lang.shell import Shell


def main(argv=None):
    """Runs phrasal interpreter. Called from phrasal console script."""
    assert sys.version_info >= (3, 7), "phrasal cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="phrasal")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--debug", action="store_true", help="log tokens and statements to stderr")
        parser.add_argument("--sentinel", default=Session.SENTINEL,
                            help=f"line that ends command-line input and runs the program (default: {Session.SENTINEL})")
        args = parser.parse_args(argv)

        if args.debug:
            logging.basicConfig(level=logging.DEBUG)

        if args.file is not None:
            Session(error_handler, args.file).run()
        else:
            Shell(Session(error_handler, Session.SH_FILE, sentinel=args.sentinel)).cmdloop()


if __name__ == "__main__":
    main()
