import pytest

from mic1sim.lexic import CompileError, Lexic, Token


def tokenize(text):
    lexic = Lexic()
    for char in text:
        lexic.transition(char)
    lexic.end()
    return lexic.table


def test_bipush_with_byte():
    assert tokenize("BIPUSH 00000001\n") == [
        Token("INSTRUCTION", "BIPUSH"),
        Token("BYTE", "00000001"),
    ]


def test_iload_with_number_without_trailing_separator():
    assert tokenize("ILOAD 3") == [Token("INSTRUCTION", "ILOAD"), Token("NUMBER", "3")]


def test_short_binary_is_number():
    assert tokenize("101") == [Token("NUMBER", "101")]


def test_long_binary_becomes_decimal_number():
    assert tokenize("000000001\n") == [Token("NUMBER", "000000001")]


def test_nul_and_newline_separate_tokens():
    assert tokenize("DUP\0DUP\n") == [Token("INSTRUCTION", "DUP"), Token("INSTRUCTION", "DUP")]


def test_unknown_word_at_end_is_rejected():
    with pytest.raises(CompileError, match="Palavra 'ADD' invalida"):
        tokenize("ADD")


def test_unknown_word_followed_by_space_keeps_space_in_message():
    with pytest.raises(CompileError) as info:
        tokenize("ADD ")
    assert str(info.value) == "[ERRO] Palavra 'ADD ' invalida!"


def test_instruction_with_extra_letters_is_rejected():
    with pytest.raises(CompileError):
        tokenize("DUPX")


def test_number_with_letter_is_rejected():
    with pytest.raises(CompileError):
        tokenize("12a")


def test_start_clears_table():
    lexic = Lexic()
    for char in "DUP\n":
        lexic.transition(char)
    assert len(lexic.table) == 1
    lexic.start()
    assert lexic.table == []


def test_print_table(capsys):
    lexic = Lexic()
    lexic.insert_token("INSTRUCTION")
    lexic.table[0].content = "DUP"
    lexic.print_table()
    assert capsys.readouterr().out == "INSTRUCTION  DUP\n"