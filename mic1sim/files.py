"""Reading and writing the simulator's input, data, register and log files."""

from pathlib import Path

from .binary import binary_to_string, string_to_binary
from .mic1 import MEMORY_SIZE, REGISTER_ORDER

INSTRUCTION_FILE = "input.txt"
REGISTER_FILE = "registradores.txt"
DATA_FILE = "dados.txt"
LOG_FILE = "log.txt"

MICROINSTRUCTION_BITS = 23
WORD_BITS = 32
MBR_BITS = 8
_MBR_INDEX = REGISTER_ORDER.index("mbr")


class FileError(Exception):
    """Raised when a simulator file is missing or malformed."""


def _read_lines(path, missing_message):
    try:
        with open(path, encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise FileError(missing_message) from exc


class FileManager:
    """Access to the files kept in one working directory."""

    def __init__(self, directory="files"):
        self.directory = Path(directory)
        self._log = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close_log_file()

    def _path(self, name):
        return self.directory / name

    def read_instructions(self):
        """Return the assembly program, one whitespace-separated word per line."""
        try:
            text = self._path(INSTRUCTION_FILE).read_text(encoding="utf-8")
        except OSError as exc:
            raise FileError("[Erro] Nao foi possivel abrir o input.txt") from exc
        return "".join(word + "\n" for word in text.split())

    def read_microinstructions(self):
        """Return the 23-bit microinstructions listed one per line."""
        lines = _read_lines(
            self._path(INSTRUCTION_FILE), "[Erro] Nao foi possivel abrir o input.txt"
        )
        instructions = []
        for number, line in enumerate(lines, start=1):
            if len(line) != MICROINSTRUCTION_BITS:
                raise FileError(
                    "[Erro] Em input.txt, o numero de bits esta invalido na linha "
                    f"{number}"
                )
            instructions.append(string_to_binary(line))
        return instructions

    def read_registers(self):
        """Return the register values in MAR, MDR, PC, MBR, SP, LV, CPP, TOS, OPC, H order."""
        lines = _read_lines(
            self._path(REGISTER_FILE),
            "[Erro] Nao foi possivel abrir o registradores.txt",
        )
        if len(lines) < len(REGISTER_ORDER):
            # Lines present before the missing ones are still validated first.
            self._parse_registers(lines)
            raise FileError("[Erro] Registradores insuficientes!")
        return self._parse_registers(lines[: len(REGISTER_ORDER)])

    @staticmethod
    def _parse_registers(lines):
        values = []
        for index, line in enumerate(lines):
            pos = line.find("=")
            if pos < 0:
                raise FileError("[Erro] Registradores invalidos!")
            bits = line[pos + 2:]
            expected = MBR_BITS if index == _MBR_INDEX else WORD_BITS
            if len(bits) != expected:
                raise FileError(
                    "[Erro] Em registradores.txt, o numero de bits esta invalido na linha "
                    f"{index + 1}"
                )
            values.append(string_to_binary(bits))
        return values

    def read_data(self):
        """Return the memory words; missing trailing words are zero."""
        lines = _read_lines(
            self._path(DATA_FILE), "[Erro] Nao foi possivel abrir o dados.txt"
        )
        data = []
        for index, line in enumerate(lines):
            if index == MEMORY_SIZE:
                raise FileError(
                    "[Erro] Ha mais dados do que o necessario no arquivo dados.txt"
                )
            if len(line) != WORD_BITS:
                raise FileError(
                    "[Erro] Em dados.txt, o numero de bits esta invalido na linha "
                    f"{index + 1}"
                )
            data.append(string_to_binary(line))
        return data + [0] * (MEMORY_SIZE - len(data))

    def write_data(self, data):
        """Write the first eight memory words back to the data file."""
        words = list(data)[:MEMORY_SIZE]
        if len(words) < MEMORY_SIZE:
            raise ValueError(f"data must hold {MEMORY_SIZE} words")
        try:
            with open(self._path(DATA_FILE), "w", encoding="utf-8") as handle:
                handle.writelines(binary_to_string(word) + "\n" for word in words)
        except OSError as exc:
            raise FileError("[Erro] Nao foi possivel abrir o dados.txt") from exc

    def create_log_file(self):
        """Open (and truncate) the log file."""
        self.close_log_file()
        try:
            self._log = open(self._path(LOG_FILE), "w", encoding="utf-8")
        except OSError as exc:
            raise FileError("[Erro] Nao foi possivel criar o log.txt") from exc

    def close_log_file(self):
        """Close the log file if it is open."""
        if self._log is not None:
            self._log.close()
            self._log = None

    def print_log(self, line):
        """Append ``line`` to the open log file."""
        if self._log is None:
            raise FileError("[Erro] O log.txt nao esta aberto")
        self._log.write(line)