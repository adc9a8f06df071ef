"""Compilation of IJVM assembly text into microinstructions."""

from .lexic import Lexic
from .syntax import Syntax


class Compiler:
    """Runs the lexer and parser over a piece of source text."""

    def __init__(self):
        self.lexic = Lexic()
        self.syntax = Syntax()

    def check_line(self, line):
        """Compile ``line``; raises CompileError on invalid input."""
        self.lexic.start()
        self.syntax.start()
        for char in line:
            self.lexic.transition(char)
        self.lexic.end()
        return self.syntax.program(self.lexic.table)