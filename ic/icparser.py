#!/usr/bin/env python3

import pyparsing as pp

from typing import Sequence

from icerror import InvalidMemoryLocation

pp.ParserElement.enable_packrat()

int_lit = pp.pyparsing_common.signed_integer.copy()
int_lit.set_name('integer')

program = pp.DelimitedList(int_lit)
program.set_name('program')

parser = program
parser.ignore(pp.dbl_slash_comment)

def parse_string(text: str) -> list[int]:
    return parser.parse_string(text, parse_all=True).as_list()

def parse_file(filename: str) -> list[int]:
    return parser.parse_file(filename, parse_all=True).as_list()

def patch(program: Sequence[int], patches: dict[int, int]) -> list[int]:
    """Returns a copy of `program` with `patches` (address -> value) applied."""
    memory = list(program)
    for address, value in patches.items():
        if not 0 <= address < len(memory):
            raise InvalidMemoryLocation(address, address)
        memory[address] = value
    return memory
