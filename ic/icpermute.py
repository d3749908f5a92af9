#!/usr/bin/env python3

from typing import Iterable, Iterator, NamedTuple, Optional

Frame = NamedTuple('Frame', [('start', int), ('swap', int), ('explored', bool)])

class Permutator:
    """Enumerates every ordering of `values` by swapping in place.

    The recursion of the classic swap-based generator is replaced by an
    explicit stack of frames. A frame swaps `array[swap]` into `start`; when
    first visited it leaves a re-entry frame behind (which undoes the swap
    and moves on to the next candidate) and descends into the suffix at
    `start + 1`. A frame at the last position is a complete permutation.

    `next()` hands out the internal buffer itself, so its contents are only
    valid until the following call. Iterating yields tuple snapshots instead.
    """

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.reset()

    def reset(self):
        self.array = self.values[:]
        self.stack: list[Frame] = [Frame(0, 0, False)]

    def next(self) -> Optional[list[int]]:
        array = self.array
        stack = self.stack
        length = len(array)
        while stack:
            start, swap, explored = stack.pop()
            if start + 1 >= length:
                return array
            if swap >= length:
                continue
            array[start], array[swap] = array[swap], array[start]
            if explored:
                stack.append(Frame(start, swap + 1, False))
            else:
                stack.append(Frame(start, swap, True))
                stack.append(Frame(start + 1, start + 1, False))
        return None

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        while (permutation := self.next()) is not None:
            yield tuple(permutation)
