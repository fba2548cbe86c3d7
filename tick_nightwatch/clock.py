"""NightClock and TickContext for the fixed-quantum night."""

import random
from typing import Callable

from tick_nightwatch.types import NightOutcome, TickContext


def display_time(minutes: int) -> tuple[int, int]:
    return minutes // 60, minutes % 60


class NightClock:
    def __init__(self, start_time: int, end_time: int, tick_rate: int) -> None:
        if tick_rate <= 0:
            raise ValueError("tick_rate must be positive")
        if end_time <= start_time:
            raise ValueError("end_time must be after start_time")
        self._start = start_time
        self._end = end_time
        self._tick_rate = tick_rate
        self._tick_number = 0

    @property
    def tick_rate(self) -> int:
        return self._tick_rate

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def minutes(self) -> int:
        return self._start + self._tick_number * self._tick_rate

    @property
    def finished(self) -> bool:
        return self.minutes >= self._end

    def advance(self) -> int:
        self._tick_number += 1
        return self.minutes

    def context(
        self, stop_fn: Callable[[NightOutcome], None], rng: random.Random
    ) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            minutes=self.minutes,
            request_stop=stop_fn,
            random=rng,
        )

    def label(self) -> str:
        hours, minutes = display_time(self.minutes)
        return f"{hours:02}:{minutes:02}"

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
