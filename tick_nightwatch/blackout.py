"""Blackout escalation - Freddy's countdown once the power is gone."""
from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WARNINGS: tuple[str, ...] = (
    "You see glowing eyes to your right.",
    "You hear a voice say, 'It's me.'",
    "You hear a voice say, 'I am still here.'",
    "You hear a voice say, 'I am always here.'",
    "You hear a voice say, 'I am always watching.'",
    "You hear a voice say, 'I am always watching you.'",
)
SILENCE = "There is silence."


@dataclass(frozen=True)
class EscalationStep:
    stage: int
    message: str
    terminal: bool


class BlackoutEscalation:
    """Deterministic stage counter layered on top of movement.

    Every :meth:`advance` emits the message for the current stage and moves
    one stage on. Stages past the warning table are terminal.
    """

    def __init__(self) -> None:
        self._stage = 0

    @property
    def stage(self) -> int:
        return self._stage

    @property
    def final_stage(self) -> int:
        return len(WARNINGS)

    def advance(self) -> EscalationStep:
        stage = self._stage
        if stage < len(WARNINGS):
            step = EscalationStep(stage=stage, message=WARNINGS[stage], terminal=False)
        else:
            step = EscalationStep(stage=stage, message=SILENCE, terminal=True)
        self._stage += 1
        logger.debug("blackout stage %d%s", stage, " (terminal)" if step.terminal else "")
        return step

    def reset(self) -> None:
        self._stage = 0
