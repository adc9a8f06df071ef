# mic1sim

A simulator for the MIC-1 microarchitecture. It compiles a small subset of
IJVM (`BIPUSH`, `DUP`, `ILOAD`) into 23-bit microinstructions, runs them on a
simulated MIC-1 data path with an 8-word memory, and writes a cycle-by-cycle
log of the registers and the memory.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the simulator

```
mic1sim
mic1sim --dir path/to/files
```

The command works on a directory, `files` by default or the one given with
`--dir`. It reads three files from it and writes one:

- `input.txt`: the program, made of whitespace-separated words:
  - `BIPUSH <byte>`, where the byte is exactly eight `0`/`1` digits,
  - `DUP`,
  - `ILOAD <number>`, where the number is a decimal count (a run of exactly
    eight `0`/`1` digits is read as a byte, not a number).

  Instruction words must be in capitals.
- `dados.txt`: the memory, at most 8 lines of 32 `0`/`1` digits each. Missing
  trailing words start as zero.
- `registradores.txt`: at least 10 lines of the form `NAME = bits`, in the
  order MAR, MDR, PC, MBR, SP, LV, CPP, TOS, OPC, H. The bits start two
  characters after the `=`. MBR takes 8 bits, every other register 32 bits.
  Lines after the tenth are ignored.
- `log.txt`: written by the run. For every cycle it holds the
  microinstruction, its decoded B bus, C bus and ALU operation, the registers
  before and after, and the memory afterwards, and ends with `FIM DO PROGRAMA`.

Errors in the program or in the input files are printed to standard error and
the command exits with a non-zero status. A fault of the machine during the
run, such as MAR pointing outside memory or SSL8 and SRA1 both set, is written
to the log and ends the run.

The run does not write the memory back to `dados.txt`; `FileManager.write_data`
does that when called from code.

## Using it as a library

```python
from mic1sim.binary import binary_to_string
from mic1sim.compiler import Compiler
from mic1sim.mic1 import Mic1

microcode = Compiler().check_line("BIPUSH 00000101\nDUP\n")

machine = Mic1()
machine.setup([0] * 8, [0] * 10)
for inst in microcode:
    if inst & 0b110000 == 0b110000:
        machine.fetch(inst)
    else:
        machine.execute_alu(inst)
        machine.read_or_write(inst)

for word in machine.memory:
    print(binary_to_string(word, 32))
```

The modules:

- `mic1sim.binary`: `string_to_binary(text)` and `binary_to_string(value, size=32)`.
- `mic1sim.lexic`: the tokenizer `Lexic`, the `Token` dataclass and `CompileError`.
- `mic1sim.syntax`: `Syntax.program(table)` turns a token list into microinstructions.
- `mic1sim.compiler`: `Compiler.check_line(text)` runs both and raises
  `CompileError` on a bad word or bad syntax.
- `mic1sim.mic1`: the `Mic1` machine (`setup`, `execute_alu`, `read_or_write`,
  `fetch`, `full_adder`, `bus_b`, `bus_c`) and `MachineError`.
- `mic1sim.files`: `FileManager(directory="files")` reads and writes the files
  above, including `read_microinstructions()` for a file of raw 23-bit lines,
  and raises `FileError` on a missing or malformed file. It is a context
  manager that closes the log on exit.
- `mic1sim.cli`: `main(argv=None)` and the decoders `decode_b`, `decode_c` and
  `decode_op`.

In the shifter only SRA1 has an effect; a result shifted by SSL8 is not used.