from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hrmachine.errors import UnexpectedTokenError


class Opcode(str, Enum):
    INBOX = "INBOX"
    OUTBOX = "OUTBOX"
    JUMP = "JUMP"


@dataclass(frozen=True, slots=True)
class Inbox:
    def __str__(self) -> str:
        return Opcode.INBOX.value


@dataclass(frozen=True, slots=True)
class Outbox:
    def __str__(self) -> str:
        return Opcode.OUTBOX.value


@dataclass(frozen=True, slots=True)
class Jump:
    label: str

    def __str__(self) -> str:
        return f"{Opcode.JUMP.value} {self.label}"


Op = Inbox | Outbox | Jump


def parse_op(line: str, *, lineno: int | None = None) -> Op:
    """Parse one instruction line.

    The line must already be stripped and must not be a label declaration.
    Jump targets are taken verbatim; they are resolved only when executed.
    """
    tokens = line.split()
    if not tokens:
        raise UnexpectedTokenError(line, line=lineno)

    head, rest = tokens[0], tokens[1:]
    op: Op
    if head == Opcode.INBOX.value:
        op = Inbox()
    elif head == Opcode.OUTBOX.value:
        op = Outbox()
    elif head == Opcode.JUMP.value:
        if not rest:
            raise UnexpectedTokenError(line, line=lineno)
        op = Jump(label=rest[0])
        rest = rest[1:]
    else:
        raise UnexpectedTokenError(line, line=lineno)

    if rest:
        raise UnexpectedTokenError(rest[0], line=lineno)
    return op
