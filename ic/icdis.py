#!/usr/bin/env python3

from typing import Iterator, NamedTuple, Optional, Sequence

from icerror import IntcodeError
from icinterpreter import Mode, Opcode, decode, format_params

Line = NamedTuple('Line', [('address', int), ('text', str)])

def _instruction(program: Sequence[int], address: int) -> Optional[tuple[Opcode, list[Mode]]]:
    try:
        opcode, modes = decode(program, address)
    except IntcodeError:
        return None
    if address + len(modes) >= len(program):
        return None
    return opcode, modes

def disassemble(program: Sequence[int]) -> Iterator[Line]:
    """Linear sweep: cells that decode to a complete instruction are listed
    as such, everything else as a single data cell."""
    address = 0
    while address < len(program):
        inst = _instruction(program, address)
        if inst is None:
            yield Line(address, f'DATA {program[address]}')
            address += 1
            continue
        opcode, modes = inst
        slots = program[address + 1:address + 1 + len(modes)]
        yield Line(address, f'{opcode.name} {format_params(modes, slots)}'.rstrip())
        address += 1 + len(modes)
