import pytest

from mic1sim.binary import string_to_binary
from mic1sim.compiler import Compiler
from mic1sim.lexic import CompileError


def test_bipush_then_dup():
    result = Compiler().check_line("BIPUSH\n00000101\nDUP\n")
    assert len(result) == 5
    assert result[1] == string_to_binary("00000101" + "000000000110000")
    assert result[3:] == [0b00110101000001001000100, 0b00010100000000010100111]


def test_iload_length_follows_operand():
    result = Compiler().check_line("ILOAD 3")
    assert len(result) == 3 + 4
    assert result.count(0b00111001100000000000000) == 3


def test_invalid_word():
    with pytest.raises(CompileError, match="Palavra 'FOO' invalida"):
        Compiler().check_line("FOO")


def test_syntax_error():
    with pytest.raises(CompileError, match="Nao ha um byte apos o BIPUSH"):
        Compiler().check_line("BIPUSH DUP")


def test_compiler_is_reusable():
    compiler = Compiler()
    first = compiler.check_line("DUP\n")
    compiler.check_line("ILOAD 1\n")
    assert compiler.check_line("DUP\n") == first