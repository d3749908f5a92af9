#!/usr/bin/env python3

import itertools

from collections import deque
from typing import Iterable, Iterator, Optional, Sequence

from icerror import NoOutput
from icinterpreter import Vm
from icpermute import Permutator

class Loopback:
    """FIFO carrying the last amplifier's output back to the first one."""

    def __init__(self, values: Iterable[int] = ()):
        self.queue: deque[int] = deque(values)

    def push(self, value: int):
        self.queue.append(value)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        try:
            return self.queue.popleft()
        except IndexError:
            raise StopIteration from None

def _wire(program: Sequence[int], first: Iterable[int], phases: Iterable[int], trace: bool) -> Vm:
    vm = Vm(program, first, trace)
    for phase in phases:
        vm = Vm(program, itertools.chain((phase,), vm), trace)
    return vm

def _split(phases: Iterable[int]) -> tuple[int, list[int]]:
    phases = list(phases)
    if not phases:
        raise ValueError('at least one phase setting is required')
    return phases[0], phases[1:]

def _thrust(outputs: Iterable[int]) -> int:
    thrust: Optional[int] = None
    for thrust in outputs:
        pass
    if thrust is None:
        raise NoOutput()
    return thrust

def chain(program: Sequence[int], phases: Iterable[int], initial: int = 0, trace: bool = False) -> int:
    first, rest = _split(phases)
    last = _wire(program, (first, initial), rest, trace)
    return _thrust(last.outputs())

def feedback(program: Sequence[int], phases: Iterable[int], initial: int = 0, trace: bool = False) -> int:
    first, rest = _split(phases)
    loopback = Loopback((first, initial))
    last = _wire(program, loopback, rest, trace)
    def mirrored() -> Iterator[int]:
        for value in last.outputs():
            loopback.push(value)
            yield value
    return _thrust(mirrored())

def max_thrust(program: Sequence[int], values: Iterable[int], loop: bool = False,
               initial: int = 0, trace: bool = False) -> tuple[int, tuple[int, ...]]:
    run = feedback if loop else chain
    best: Optional[tuple[int, tuple[int, ...]]] = None
    permutator = Permutator(values)
    while (phases := permutator.next()) is not None:
        thrust = run(program, phases, initial, trace)
        if best is None or thrust > best[0]:
            best = (thrust, tuple(phases))
    assert best is not None
    return best
