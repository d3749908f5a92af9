#!/usr/bin/env python3

class IntcodeError(RuntimeError):
    pass

class InvalidInstruction(IntcodeError):
    def __init__(self, value: int, position: int):
        self.value = value
        self.position = position
        super().__init__(f'invalid instruction {value} referenced at {position}')

class InvalidParameterMode(IntcodeError):
    def __init__(self, digit: int, position: int):
        self.digit = digit
        self.position = position
        super().__init__(f'invalid parameter mode {digit} referenced at {position}')

class NotEnoughParametersForInstruction(IntcodeError):
    def __init__(self, opcode: int, expected: int, shortfall: int):
        self.opcode = opcode
        self.expected = expected
        self.shortfall = shortfall
        super().__init__(f'not enough parameters for instruction {opcode}: '
                         f'expected {expected}, memory is {shortfall} short')

class InvalidMemoryLocation(IntcodeError):
    def __init__(self, address: int, position: int):
        self.address = address
        self.position = position
        super().__init__(f'invalid memory location {address} referenced at {position}')

class UnexpectedParameterModeForWritable(IntcodeError):
    def __init__(self, mode: int, position: int):
        self.mode = mode
        self.position = position
        super().__init__(f'writable parameter at {position} has parameter mode {mode}, '
                         'the parameter mode must be 0')

class InstructionPointerOutOfBounds(IntcodeError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f'instruction pointer is at {position} which is out of bounds')

class InputExhausted(IntcodeError):
    def __init__(self):
        super().__init__('input exhausted')

class NoOutput(IntcodeError):
    def __init__(self):
        super().__init__('program halted without producing output')
