from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hrmachine.errors import (
    EmptyAccumulatorError,
    EndOfInputError,
    MaxCyclesExceededError,
    UndefinedLabelError,
)
from hrmachine.ops import Inbox, Jump, Outbox
from hrmachine.schemas import Value
from hrmachine.solution import Solution

logger = logging.getLogger(__name__)

CYCLE_LIMIT = 1000


@dataclass(frozen=True)
class RunResult:
    cycles: int
    output: list[Value]


class Program:
    """Executes a loaded Solution.

    The solution's instructions and labels are shared, never copied or mutated,
    so one Program can be replayed against many inputs. Runtime state is reset
    at the start of every run.
    """

    def __init__(self, solution: Solution, *, cycle_limit: int = CYCLE_LIMIT) -> None:
        if cycle_limit < 1:
            raise ValueError("cycle_limit must be >= 1")
        self.ops = solution.ops
        self.labels = solution.labels
        self.cycle_limit = int(cycle_limit)
        self.acc: Value | None = None
        self.cycles = 0
        self.pc = 0
        self.output: list[Value] = []

    def reset(self) -> None:
        self.acc = None
        self.cycles = 0
        self.pc = 0
        self.output = []

    def run(self, values: Iterable[Value]) -> RunResult:
        inbox = iter(values)
        self.reset()

        while 0 <= self.pc < len(self.ops):
            op = self.ops[self.pc]
            logger.debug("pc=%d op=%s", self.pc, op)

            if isinstance(op, Inbox):
                self._inbox(inbox)
            elif isinstance(op, Outbox):
                self._outbox()
            elif isinstance(op, Jump):
                self._jump(op.label)
            else:
                raise TypeError(f"unknown op: {type(op).__name__}")

            self.cycles += 1
            if self.cycles > self.cycle_limit:
                raise MaxCyclesExceededError(self.cycle_limit)

        output, self.output = self.output, []
        return RunResult(cycles=self.cycles, output=output)

    def _inbox(self, inbox: Iterator[Value]) -> None:
        try:
            value = next(inbox)
        except StopIteration:
            raise EndOfInputError() from None
        logger.debug("inbox: %s", value)
        self.acc = value
        self.pc += 1

    def _outbox(self) -> None:
        if self.acc is None:
            raise EmptyAccumulatorError()
        logger.debug("outbox: %s", self.acc)
        self.output.append(self.acc)
        self.acc = None
        self.pc += 1

    def _jump(self, label: str) -> None:
        logger.debug("jump to %s", label)
        try:
            self.pc = self.labels[label]
        except KeyError:
            raise UndefinedLabelError(label) from None
