#!/usr/bin/env python3

import icamplifier
import icdis
import icerror
import icinterpreter
import icparser

import optparse
import pyparsing
import sys

from typing import Optional

def parse_args(argv: list[str]) -> tuple[optparse.Values, list[str]]:
    usage = 'usage: %prog [options] filename'
    p = optparse.OptionParser(usage=usage)
    p.add_option('--input',
                 metavar='\'V [V...]\'',
                 action='store',
                 type='string',
                 default='',
                 help='feed values V to the program\'s input instructions'
                 )
    p.add_option('--patch',
                 metavar='ADDR=VALUE',
                 action='append',
                 type='string',
                 default=[],
                 help='store VALUE at ADDR before running (repeatable)'
                 )
    p.add_option('--result',
                 action='store_true',
                 default=False,
                 help='print the value at address 0 after halting'
                 )
    p.add_option('--amplify',
                 metavar='\'P [P...]\'',
                 action='store',
                 type='string',
                 help='search phase settings P for the highest thrust'
                 )
    p.add_option('--feedback',
                 action='store_true',
                 default=False,
                 help='connect the amplifiers in a feedback loop'
                 )
    p.add_option('--dis',
                 action='store_true',
                 default=False,
                 help='disassemble program'
                 )
    p.add_option('--trace',
                 action='store_true',
                 default=False,
                 help='display executed instructions step by step'
                 )
    return p.parse_args(argv)

def parse_ints(arg: str) -> list[int]:
    return list(map(int, arg.split()))

def parse_patches(args: list[str]) -> dict[int, int]:
    patches: dict[int, int] = {}
    for arg in args:
        address, value = arg.split('=')
        patches[int(address)] = int(value)
    return patches

def load(filename: str, patch_args: list[str]) -> list[int]:
    program = icparser.parse_file(filename)
    try:
        patches = parse_patches(patch_args)
    except ValueError:
        print('error: malformed patch argument', file=sys.stderr)
        exit(1)
    return icparser.patch(program, patches)

def run(program: list[int], input_arg: str, result: bool, trace: bool) -> Optional[int]:
    try:
        inputs = parse_ints(input_arg)
    except ValueError:
        print('error: malformed input argument', file=sys.stderr)
        return 1
    vm = icinterpreter.Vm(program, inputs, trace)
    for value in vm.outputs():
        print(value)
    if result:
        print(vm[0])

def amplify(program: list[int], phases_arg: str, loop: bool, input_arg: str, trace: bool) -> Optional[int]:
    try:
        phases = parse_ints(phases_arg)
        initial, = parse_ints(input_arg) or [0]
    except ValueError:
        print('error: malformed phase or input argument', file=sys.stderr)
        return 1
    if not phases:
        print('error: no phase settings provided', file=sys.stderr)
        return 1
    thrust, best = icamplifier.max_thrust(program, phases, loop, initial, trace)
    print(f'{thrust} ({" ".join(map(str, best))})')

def dis(program: list[int]):
    for address, text in icdis.disassemble(program):
        print(f'{address:04d} {text}')

def main(argv: list[str]) -> Optional[int]:
    options, args = parse_args(argv)
    try:
        filename = args[1]
    except IndexError:
        print('error: no file provided', file=sys.stderr)
        return 1
    try:
        program = load(filename, options.patch)
        if options.dis:
            return dis(program)
        elif options.amplify != None:
            assert isinstance(options.amplify, str)
            return amplify(program, options.amplify, options.feedback, options.input, options.trace)
        else:
            return run(program, options.input, options.result, options.trace)
    except OSError as os_err:
        print(f'error: {os_err.filename}: {os_err.strerror}', file=sys.stderr)
        return 1
    except pyparsing.exceptions.ParseBaseException as pe:
        print(pe.explain(depth=0), file=sys.stderr)
        return 1
    except icerror.IntcodeError as err:
        print(f'{filename}: error: {err}', file=sys.stderr)
        return 1

def entry():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    status = main(sys.argv)
    sys.exit(status)
