#!/usr/bin/env python3

import sys

from typing import Callable, Iterable, Iterator, NamedTuple, Optional, Sequence
from enum import Enum, IntEnum, unique

from icerror import *

@unique
class Opcode(IntEnum):
    ADD = 1             # dest <- a + b
    MUL = 2             # dest <- a * b
    IN = 3              # dest <- next input
    OUT = 4             # emit a
    JMP_IF = 5          # if a != 0 goto b
    JMP_UNLESS = 6      # if a == 0 goto b
    LT = 7              # dest <- a < b
    EQ = 8              # dest <- a == b
    END = 99            # halt

@unique
class Mode(IntEnum):
    POSITION = 0        # memory[slot]
    IMMEDIATE = 1       # slot

class Kind(Enum):
    READ = 'read'
    WRITE = 'write'

Signature = NamedTuple('Signature', [('params', tuple[Kind, ...]), ('terminator', bool),
                                     ('output', bool), ('jumps', bool)])

_R, _W = Kind.READ, Kind.WRITE

SIGNATURES: dict[Opcode, Signature] = {
    Opcode.ADD: Signature((_R, _R, _W), False, False, False),
    Opcode.MUL: Signature((_R, _R, _W), False, False, False),
    Opcode.IN: Signature((_W,), False, False, False),
    Opcode.OUT: Signature((_R,), False, True, False),
    Opcode.JMP_IF: Signature((_R, _R), False, False, True),
    Opcode.JMP_UNLESS: Signature((_R, _R), False, False, True),
    Opcode.LT: Signature((_R, _R, _W), False, False, False),
    Opcode.EQ: Signature((_R, _R, _W), False, False, False),
    Opcode.END: Signature((), True, False, False),
}

class Status(Enum):
    PROGRESSED = 'progressed'
    OUTPUT = 'output'
    HALTED = 'halted'

StepResult = NamedTuple('StepResult', [('status', Status), ('value', Optional[int])])

PROGRESSED = StepResult(Status.PROGRESSED, None)
HALTED = StepResult(Status.HALTED, None)

def decode(memory: Sequence[int], ip: int) -> tuple[Opcode, list[Mode]]:
    """Splits the instruction word at `ip` into its opcode and one
    addressing mode per declared parameter, lowest digit first."""
    if not 0 <= ip < len(memory):
        raise InstructionPointerOutOfBounds(ip)
    word = memory[ip]
    if word < 0:
        raise InvalidInstruction(word, ip)
    try:
        opcode = Opcode(word % 100)
    except ValueError:
        raise InvalidInstruction(word, ip) from None
    digits = word // 100
    modes: list[Mode] = []
    for _ in SIGNATURES[opcode].params:
        digit = digits % 10
        try:
            modes.append(Mode(digit))
        except ValueError:
            raise InvalidParameterMode(digit, ip) from None
        digits //= 10
    return opcode, modes

def format_params(modes: Sequence[Mode], slots: Sequence[int]) -> str:
    return ' '.join(f'#{slot}' if mode == Mode.IMMEDIATE else f'[{slot}]'
                    for mode, slot in zip(modes, slots))

class Vm:
    def __init__(self, program: Iterable[int], inputs: Iterable[int] = (), trace: bool = False):
        self.memory = list(program)
        self.ip = 0
        self.inputs = iter(inputs)
        self.trace = trace
        self.halted = False
        self.jump: Optional[int] = None
        self.code: dict[Opcode, Callable[..., Optional[int]]] = {
            Opcode.ADD: self._add,
            Opcode.MUL: self._mul,
            Opcode.IN: self._in,
            Opcode.OUT: self._out,
            Opcode.JMP_IF: self._jmp_if,
            Opcode.JMP_UNLESS: self._jmp_unless,
            Opcode.LT: self._lt,
            Opcode.EQ: self._eq,
            Opcode.END: self._end,
        }

    def __getitem__(self, address: int) -> int:
        return self.memory[address]

    def __len__(self) -> int:
        return len(self.memory)

    def __iter__(self) -> Iterator[int]:
        return self.outputs()

    def _add(self, a: int, b: int, dest: int):
        self.memory[dest] = a + b

    def _mul(self, a: int, b: int, dest: int):
        self.memory[dest] = a * b

    def _in(self, dest: int):
        value = next(self.inputs, None)
        if value is None:
            raise InputExhausted()
        self.memory[dest] = value

    def _out(self, a: int) -> int:
        return a

    def _jmp_if(self, a: int, b: int):
        if a != 0:
            self.jump = b

    def _jmp_unless(self, a: int, b: int):
        if a == 0:
            self.jump = b

    def _lt(self, a: int, b: int, dest: int):
        self.memory[dest] = int(a < b)

    def _eq(self, a: int, b: int, dest: int):
        self.memory[dest] = int(a == b)

    def _end(self):
        pass

    def _address(self, slot: int) -> int:
        address = self.memory[slot]
        if not 0 <= address < len(self.memory):
            raise InvalidMemoryLocation(address, slot)
        return address

    def _resolve(self, kind: Kind, mode: Mode, slot: int) -> int:
        if kind == Kind.WRITE:
            if mode != Mode.POSITION:
                raise UnexpectedParameterModeForWritable(int(mode), slot)
            return self._address(slot)
        if mode == Mode.IMMEDIATE:
            return self.memory[slot]
        return self.memory[self._address(slot)]

    def step(self) -> StepResult:
        if self.halted:
            return HALTED
        memory = self.memory
        ip = self.ip
        opcode, modes = decode(memory, ip)
        signature = SIGNATURES[opcode]
        count = len(signature.params)
        if ip + count >= len(memory):
            raise NotEnoughParametersForInstruction(int(opcode), count, ip + count + 1 - len(memory))
        params = [self._resolve(kind, mode, ip + i + 1)
                  for i, (kind, mode) in enumerate(zip(signature.params, modes))]
        if self.trace:
            slots = memory[ip + 1:ip + 1 + count]
            print(f'{ip:04d} {opcode.name} {format_params(modes, slots)}'.rstrip(), file=sys.stderr)
        self.jump = None
        value = self.code[opcode](*params)
        if signature.terminator:
            self.halted = True
            return HALTED
        if signature.jumps and self.jump is not None:
            self.ip = self.jump
        else:
            self.ip = ip + 1 + count
        if signature.output:
            return StepResult(Status.OUTPUT, value)
        return PROGRESSED

    def run_to_completion(self) -> int:
        while self.step().status != Status.HALTED:
            pass
        return self.memory[0]

    def outputs(self) -> Iterator[int]:
        while True:
            status, value = self.step()
            if status == Status.HALTED:
                return
            if status == Status.OUTPUT:
                assert value is not None
                yield value
