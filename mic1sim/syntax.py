"""Parsing of the token table into MIC-1 microinstructions."""

from .binary import string_to_binary
from .lexic import CompileError, Token

_INC_SP_TO_MAR = 0b00110101000001001000100  # SP = MAR = SP+1
_FETCH_SUFFIX = "000000000110000"  # byte goes into MBR, H = MBR
_WRITE_H_TO_TOS = 0b00011000001000010100000  # MDR = TOS = H; wr
_WRITE_TOS = 0b00010100000000010100111  # MDR = TOS; wr
_LOAD_LV = 0b00010100100000000000101  # H = LV
_INC_H = 0b00111001100000000000000  # H = H+1
_READ_H = 0b00011000000000001010000  # MAR = H; rd
_INC_SP_WRITE = 0b00110101000001001100100  # MAR = SP = SP+1; wr
_MDR_TO_TOS = 0b00010100001000000000000  # TOS = MDR


class Syntax:
    """Turns a token table into a list of 23-bit microinstructions."""

    def __init__(self):
        self.start()

    def start(self):
        """Reset the parser."""
        self._table = []
        self._binaries = []
        self._position = 0

    def current_token(self, i):
        """Return token ``i``, or a NULL token past the end of the table."""
        if i < len(self._table):
            return self._table[i]
        return Token("NULL", "NULL")

    def program(self, table):
        """Parse ``table`` and return the generated microinstructions."""
        self._table = table
        self._execute()
        if self._position < len(table):
            raise CompileError(
                f"[ERRO] Sintaxe invalida no token {table[self._position].content}"
            )
        return list(self._binaries)

    def _execute(self):
        while True:
            content = self.current_token(self._position).content
            if content == "BIPUSH":
                self._bipush()
            elif content == "DUP":
                self._dup()
            elif content == "ILOAD":
                self._iload()
            else:
                return

    def _bipush(self):
        self._position += 1
        operand = self.current_token(self._position)
        if operand.classifier != "BYTE":
            raise CompileError("[ERRO] Nao ha um byte apos o BIPUSH!")
        self._binaries.append(_INC_SP_TO_MAR)
        self._binaries.append(string_to_binary(operand.content + _FETCH_SUFFIX))
        self._binaries.append(_WRITE_H_TO_TOS)
        self._position += 1

    def _dup(self):
        self._binaries.extend((_INC_SP_TO_MAR, _WRITE_TOS))
        self._position += 1

    def _iload(self):
        self._position += 1
        operand = self.current_token(self._position)
        if operand.classifier != "NUMBER":
            raise CompileError("[ERRO] Nao ha um numero apos o ILOAD!")
        self._binaries.append(_LOAD_LV)
        self._binaries.extend([_INC_H] * int(operand.content))
        self._binaries.extend((_READ_H, _INC_SP_WRITE, _MDR_TO_TOS))
        self._position += 1