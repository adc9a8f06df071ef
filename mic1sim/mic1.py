"""A MIC-1 datapath: ALU, shifter, buses and an eight-word memory."""

from .binary import WORD_MASK

MEMORY_SIZE = 8
REGISTER_ORDER = ("mar", "mdr", "pc", "mbr", "sp", "lv", "cpp", "tos", "opc", "h")

_BUS_C_TARGETS = (
    ("h", 14),
    ("opc", 13),
    ("tos", 12),
    ("cpp", 11),
    ("lv", 10),
    ("sp", 9),
    ("pc", 8),
    ("mdr", 7),
    ("mar", 6),
)


class MachineError(Exception):
    """Raised when a microinstruction cannot be executed."""


class Mic1:
    """Registers, ALU outputs and memory of the simulated machine."""

    def __init__(self):
        self.memory = [0] * MEMORY_SIZE
        self.ir = 0
        self.mbr = 0
        self.mar = self.mdr = self.pc = self.sp = self.lv = 0
        self.cpp = self.tos = self.opc = self.h = 0
        self._reset_alu()

    def _reset_alu(self):
        self.output = 0
        self.shifted = 0
        self.carry = False
        self.n = False
        self.z = False

    def setup(self, memory, registers):
        """Load the memory words and registers (MAR, MDR, PC, MBR, SP, LV, CPP, TOS, OPC, H)."""
        memory = list(memory)
        registers = list(registers)
        if len(memory) != MEMORY_SIZE:
            raise ValueError(f"memory must hold {MEMORY_SIZE} words")
        if len(registers) != len(REGISTER_ORDER):
            raise ValueError(f"expected {len(REGISTER_ORDER)} registers")
        self.memory = [word & WORD_MASK for word in memory]
        (self.mar, self.mdr, self.pc, self.mbr, self.sp,
         self.lv, self.cpp, self.tos, self.opc, self.h) = (v & WORD_MASK for v in registers)
        self.mbr &= 0xFF
        self.ir = 0
        self._reset_alu()

    def execute_alu(self, inst):
        """Run the ALU and shifter for ``inst`` and write the C bus."""
        self.ir = inst & WORD_MASK
        ssl8 = bool(inst >> 22 & 1)
        sra1 = bool(inst >> 21 & 1)
        op = inst >> 19 & 0b11
        ena = inst >> 18 & 1
        enb = inst >> 17 & 1
        inva = inst >> 16 & 1
        inc = inst >> 15 & 1

        a = (self.h if ena else 0) ^ (WORD_MASK if inva else 0)
        b = self.bus_b(inst) if enb else 0

        self.carry = False
        if op == 0b00:
            self.output = a & b
        elif op == 0b01:
            self.output = a | b
        elif op == 0b10:
            self.output = ~b & WORD_MASK
        else:
            self.full_adder(a, b)

        if inc:
            self.full_adder(self.output, 1)

        if ssl8 and sra1:
            raise MachineError("[Erro] Sinal de entrada SSL8/SRA1 inválido")

        # Only SRA1 reaches the shifter output; an SSL8 result is overwritten.
        self.shifted = self.output >> 1 if sra1 else self.output

        self.bus_c(inst)

        self.z = self.output == 0
        self.n = bool(self.output >> 31 & 1)

    def read_or_write(self, inst):
        """Perform the memory read and/or write requested by ``inst``."""
        read = inst >> 4 & 1
        write = inst >> 5 & 1
        if self.mar >= MEMORY_SIZE:
            raise MachineError("[Erro] MAR excede o valor da memória")
        if read:
            self.mdr = self.memory[self.mar]
        if write:
            self.memory[self.mar] = self.mdr

    def fetch(self, inst):
        """Load the byte in bits 15-22 of ``inst`` into MBR and H."""
        self.mbr = inst >> 15 & 0xFF
        self.h = self.mbr

    def full_adder(self, a, b):
        """Add ``a`` and ``b`` with the current carry; store and return the sum."""
        total = (a & WORD_MASK) + (b & WORD_MASK) + int(self.carry)
        self.output = total & WORD_MASK
        self.carry = bool(total >> 32)
        return self.output

    def bus_b(self, inst):
        """Return the register selected by the low four bits of ``inst``."""
        match inst & 0b1111:
            case 0b0000:
                return self.mdr
            case 0b0001:
                return self.pc
            case 0b0010:
                return (0xFFFFFF00 | self.mbr) if self.mbr >> 7 & 1 else self.mbr
            case 0b0011:
                return self.mbr
            case 0b0100:
                return self.sp
            case 0b0101:
                return self.lv
            case 0b0110:
                return self.cpp
            case 0b0111:
                return self.tos
            case 0b1000:
                return self.opc
        return 0

    def bus_c(self, inst):
        """Write the shifter output into every register enabled in ``inst``."""
        for name, bit in _BUS_C_TARGETS:
            if inst >> bit & 1:
                setattr(self, name, self.shifted)