from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from hrmachine.errors import ProgramError
from hrmachine.program import CYCLE_LIMIT, Program
from hrmachine.schemas import Goals, Level, TestCase, Value
from hrmachine.solution import Solution


@dataclass(frozen=True)
class CaseResult:
    index: int
    input: list[Value]
    expected: list[Value]
    output: list[Value] | None
    cycles: int | None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.output == self.expected


def run_tests(*, program: Program, tests: Sequence[TestCase]) -> list[CaseResult]:
    results: list[CaseResult] = []
    for i, case in enumerate(tests):
        try:
            run = program.run(case.input)
        except ProgramError as e:
            results.append(
                CaseResult(
                    index=i,
                    input=list(case.input),
                    expected=list(case.output),
                    output=None,
                    cycles=None,
                    error=str(e),
                )
            )
            continue
        results.append(
            CaseResult(
                index=i,
                input=list(case.input),
                expected=list(case.output),
                output=list(run.output),
                cycles=run.cycles,
            )
        )
    return results


def all_passed(results: list[CaseResult]) -> bool:
    return all(r.passed for r in results)


@dataclass(frozen=True)
class SolutionReport:
    size: int
    goals: Goals
    results: list[CaseResult]

    @property
    def passed(self) -> bool:
        return all_passed(self.results)

    @property
    def speed(self) -> float | None:
        # Mean cycles over all cases; undefined unless every case passed.
        if not self.results or not self.passed:
            return None
        return sum(int(r.cycles or 0) for r in self.results) / len(self.results)

    @property
    def size_goal_met(self) -> bool:
        return self.size <= self.goals.size

    @property
    def speed_goal_met(self) -> bool:
        speed = self.speed
        return speed is not None and speed <= self.goals.speed


def score_solution(
    *, solution: Solution, level: Level, cycle_limit: int = CYCLE_LIMIT
) -> SolutionReport:
    program = Program(solution, cycle_limit=cycle_limit)
    results = run_tests(program=program, tests=level.tests)
    return SolutionReport(size=len(solution), goals=level.goals, results=results)
