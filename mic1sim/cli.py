"""Command line entry point: compile the program and run it on the MIC-1."""

import argparse
import sys

from .binary import binary_to_string
from .compiler import Compiler
from .files import FileError, FileManager
from .lexic import CompileError
from .mic1 import MachineError, Mic1

_SEPARATOR = "=====================================================\n"

_C_BUS_NAMES = (
    (14, "H"),
    (13, "OPC"),
    (12, "TOS"),
    (11, "CPP"),
    (10, "LV"),
    (9, "SP"),
    (8, "PC"),
    (7, "MDR"),
    (6, "MAR"),
)

_B_BUS_NAMES = ("MDR", "PC", "MBR", "MBRU", "SP", "LV", "CPP", "TOS", "OPC")
_OP_NAMES = ("AND", "OR", "NOT", "+")

_LOGGED_REGISTERS = (
    ("MAR", "mar", 32),
    ("MDR", "mdr", 32),
    ("PC", "pc", 32),
    ("MBR", "mbr", 8),
    ("SP", "sp", 32),
    ("LV", "lv", 32),
    ("CPP", "cpp", 32),
    ("TOS", "tos", 32),
    ("OPC", "opc", 32),
    ("H", "h", 32),
)

_READ_WRITE = 0b110000


def decode_c(inst):
    """Name the registers written by the C bus, each followed by a space."""
    return "".join(f"{name} " for bit, name in _C_BUS_NAMES if inst >> bit & 1)


def decode_b(inst):
    """Name the register driving the B bus, or ``X`` for an unused code."""
    code = inst & 0b1111
    return _B_BUS_NAMES[code] if code < len(_B_BUS_NAMES) else "X"


def decode_op(inst):
    """Name the ALU operation selected by ``inst``."""
    return _OP_NAMES[inst >> 19 & 0b11]


def _log_registers(files, machine, title):
    files.print_log(f"> {title}\n")
    for label, attr, size in _LOGGED_REGISTERS:
        files.print_log(f"{label} = {binary_to_string(getattr(machine, attr), size)}\n")
    files.print_log("\n")


def _run(files, machine, instructions):
    files.print_log(_SEPARATOR)
    files.print_log("Comeco do programa\n")
    files.print_log(_SEPARATOR)

    for cycle, inst in enumerate(instructions, start=1):
        files.print_log(f"Ciclo {cycle}\n")
        files.print_log(f"IR = {binary_to_string(inst, 23)}\n\n")
        files.print_log(f"BAR_B : {decode_b(inst)}\n")
        files.print_log(f"BAR_C : {decode_c(inst)}\n")
        files.print_log(f"OP : {decode_op(inst)}\n\n")

        _log_registers(files, machine, "Registradores antes da instrucao")

        try:
            if inst & _READ_WRITE == _READ_WRITE:
                machine.fetch(inst)
            else:
                machine.execute_alu(inst)
                machine.read_or_write(inst)
        except MachineError as exc:
            files.print_log(f"{exc}\n")
            break

        _log_registers(files, machine, "Registradores depois da instrucao")

        files.print_log("> Memoria depois da instrucao\n")
        for word in machine.memory:
            files.print_log(binary_to_string(word) + "\n")
        files.print_log(_SEPARATOR)

    files.print_log("FIM DO PROGRAMA")


def main(argv=None):
    """Compile the program, execute it and write the log; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="mic1sim", description="Run an IJVM program on a simulated MIC-1."
    )
    parser.add_argument(
        "--dir",
        default="files",
        help="directory holding input.txt, dados.txt and registradores.txt",
    )
    args = parser.parse_args(argv)

    files = FileManager(args.dir)
    machine = Mic1()

    try:
        instructions = Compiler().check_line(files.read_instructions())
        data = files.read_data()
        registers = files.read_registers()
        files.create_log_file()
        machine.setup(data, registers)
    except (CompileError, FileError) as exc:
        files.close_log_file()
        print(exc, file=sys.stderr)
        return -1

    with files:
        _run(files, machine, instructions)
    return 0


if __name__ == "__main__":
    sys.exit(main())