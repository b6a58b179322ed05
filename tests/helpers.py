from __future__ import annotations

from hrmachine.schemas import Value, as_value
from hrmachine.solution import HEADER, Solution, load_solution


def source(*lines: str) -> str:
    return "\n".join([HEADER, *lines]) + "\n"


def load(*lines: str) -> Solution:
    return load_solution(source(*lines))


def values(*items: int) -> list[Value]:
    return [as_value(i) for i in items]
