from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from hrmachine.errors import (
    DuplicateLabelError,
    InvalidHeaderError,
    MissingHeaderError,
    SourceReadError,
)
from hrmachine.ops import Op, parse_op

logger = logging.getLogger(__name__)

HEADER = "-- HUMAN RESOURCE MACHINE PROGRAM --"


@dataclass(frozen=True)
class Solution:
    """A loaded program: instructions addressed by index plus the label table."""

    ops: tuple[Op, ...]
    labels: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.ops)

    @property
    def size(self) -> int:
        return len(self.ops)


class SolutionLoader:
    def __init__(self, *, header: str = HEADER) -> None:
        self.header = header
        self.label_pattern = re.compile(r"(?P<name>[A-Za-z]+):")

    def _lines(self, text: str) -> list[tuple[int, str]]:
        out: list[tuple[int, str]] = []
        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if line:
                out.append((lineno, line))
        return out

    def load(self, text: str) -> Solution:
        lines = self._lines(text)
        if not lines:
            raise MissingHeaderError()

        header_lineno, header = lines[0]
        if header != self.header:
            raise InvalidHeaderError(header, line=header_lineno)

        ops: list[Op] = []
        labels: dict[str, int] = {}
        for lineno, line in lines[1:]:
            m = self.label_pattern.fullmatch(line)
            if m is not None:
                name = m.group("name")
                if name in labels:
                    raise DuplicateLabelError(name, line=lineno)
                labels[name] = len(ops)
                continue
            ops.append(parse_op(line, lineno=lineno))

        logger.debug("loaded %d instructions, %d labels", len(ops), len(labels))
        return Solution(ops=tuple(ops), labels=MappingProxyType(labels))

    def load_file(self, path: Path) -> Solution:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"cannot read {path}: {e}") from e
        return self.load(text)


def load_solution(text: str, *, loader: SolutionLoader | None = None) -> Solution:
    return (loader or SolutionLoader()).load(text)


def load_solution_file(path: Path, *, loader: SolutionLoader | None = None) -> Solution:
    return (loader or SolutionLoader()).load_file(path)
