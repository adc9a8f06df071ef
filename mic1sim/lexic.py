"""Lexical analysis of the small IJVM assembly language."""

from dataclasses import dataclass
from enum import IntEnum

_SEPARATORS = frozenset("\n \0")
_INSTRUCTIONS = frozenset({"ILOAD", "DUP", "BIPUSH"})


class CompileError(Exception):
    """Raised when a program cannot be tokenised or parsed."""


@dataclass
class Token:
    classifier: str
    content: str


class _State(IntEnum):
    ERROR = -1
    START = 0
    WORD = 1
    INSTRUCTION = 2
    BINARY = 3
    NUMBER = 4


def _is_alpha(char):
    return char.isascii() and char.isalpha()


def _is_digit(char):
    return char in "0123456789"


class Lexic:
    """Character-driven tokenizer producing a table of tokens."""

    def __init__(self):
        self.table = []
        self.start()

    def start(self):
        """Reset the automaton and clear the token table."""
        self._state = _State.START
        self._symbol = ""
        self.table = []

    def transition(self, c):
        """Feed one character to the automaton."""
        state = self._state
        if state == _State.START:
            if _is_alpha(c):
                self._symbol += c
                self._state = _State.WORD
            elif c in "01":
                self._symbol += c
                self._state = _State.BINARY
            elif _is_digit(c):
                self._symbol += c
                self._state = _State.NUMBER
            elif c not in _SEPARATORS:
                self._fail(c)
        elif state == _State.WORD:
            if _is_alpha(c):
                self._symbol += c
                if self._symbol in _INSTRUCTIONS:
                    self._state = _State.INSTRUCTION
            else:
                self._fail(c)
        elif state == _State.INSTRUCTION:
            if c in _SEPARATORS:
                self.insert_token("INSTRUCTION")
            else:
                self._fail(c)
        elif state == _State.BINARY:
            if len(self._symbol) < 8 and c in "01":
                self._symbol += c
            elif _is_digit(c):
                # Binary-looking numbers longer than a byte are decimal numbers.
                self._symbol += c
                self._state = _State.NUMBER
            elif c in _SEPARATORS:
                self._insert_binary()
            else:
                self._fail(c)
        elif state == _State.NUMBER:
            if _is_digit(c):
                self._symbol += c
            elif c in _SEPARATORS:
                self.insert_token("NUMBER")
            else:
                self._fail(c)

    def insert_token(self, classifier):
        """Store the current symbol under ``classifier`` and restart."""
        self.table.append(Token(classifier, self._symbol))
        self._symbol = ""
        self._state = _State.START

    def print_table(self):
        """Print every token as ``classifier  content``."""
        for token in self.table:
            print(f"{token.classifier}  {token.content}")

    def end(self):
        """Finish the input, emitting a pending token or raising CompileError."""
        if self._state in (_State.ERROR, _State.WORD):
            raise CompileError(f"[ERRO] Palavra '{self._symbol}' invalida!")
        if self._state == _State.INSTRUCTION:
            self.insert_token("INSTRUCTION")
        elif self._state == _State.BINARY:
            self._insert_binary()
        elif self._state == _State.NUMBER:
            self.insert_token("NUMBER")

    def _insert_binary(self):
        self.insert_token("BYTE" if len(self._symbol) == 8 else "NUMBER")

    def _fail(self, char):
        self._state = _State.ERROR
        self._symbol += char