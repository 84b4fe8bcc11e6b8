"""Session control for phrasal. Collects program text, either line by line from the command-line until the sentinel
line is seen or all at once from a file, and then lexes and runs it.
"""

import logging

from phrasal.lang.error import GenericException
from phrasal.lang.interpreter import Interpreter
from phrasal.lang.lexical import tokenize


class Session:
    """Governs a phrasal session: one program, assembled and then run."""
    SH_FILE = "<in>"     # command-line interpreter filename
    SENTINEL = "exit"    # line that ends command-line input

    def __init__(self, error_handler, path, sentinel=SENTINEL):
        self.error_handler = error_handler

        self.path = path          # used for error messages
        self.sentinel = sentinel  # only applies to command-line input
        self.lines = []
        self.finished = False     # whether or not the sentinel has been seen

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.lines = [Session.preprocess_line(line) for line in file]
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            self.finished = True

    @staticmethod
    def preprocess_line(line):
        """Removes the line terminator, if any."""
        return line.rstrip("\r\n")

    @property
    def source(self):
        """Program text assembled so far."""
        return "".join(line + "\n" for line in self.lines)

    def add(self, line):
        """Adds a line of program text to this session. Returns whether or not the program is complete, i.e. line (or
        an earlier one) was the sentinel. Lines after the sentinel are ignored.
        """
        if not self.finished:
            line = Session.preprocess_line(line)
            if line == self.sentinel:
                self.finished = True
            else:
                self.lines.append(line)

        return self.finished

    def run(self, stdin=None, stdout=None):
        """Lexes and runs this session's program with a fresh Interpreter, which is returned. GenericExceptions raised
        while running are not caught here.
        """
        logging.debug("running %s (%d lines)", self.path, len(self.lines))

        interpreter = Interpreter(tokenize(self.source), stdin=stdin, stdout=stdout)
        interpreter.run()
        return interpreter
