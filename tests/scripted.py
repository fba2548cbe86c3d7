"""Deterministic random source for tests: randrange returns scripted values."""
from __future__ import annotations

import itertools
import random
from typing import Iterable


class ScriptedRandom(random.Random):
    """``random.Random`` whose :meth:`randrange` replays *values* in order.

    Once the script runs out, *then* (if given) is repeated forever;
    otherwise another call raises ``AssertionError``. Every value is checked
    against the requested range so a mis-scripted test fails loudly.
    """

    def __init__(self, values: Iterable[int] = (), then: int | None = None) -> None:
        super().__init__(0)
        tail = itertools.repeat(then) if then is not None else iter(())
        self._script = itertools.chain(values, tail)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        if stop is None:
            start, stop = 0, start
        self.calls.append((start, stop))
        value = next(self._script, None)
        assert value is not None, f"script exhausted at randrange({start}, {stop})"
        assert start <= value < stop, f"{value} outside randrange({start}, {stop})"
        return value
