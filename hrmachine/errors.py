from __future__ import annotations


class LoadError(Exception):
    """Raised while loading a program; no partial program is usable afterwards."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(prefix + str(message))


class MissingHeaderError(LoadError):
    def __init__(self) -> None:
        super().__init__("program must start with a HRM header")


class InvalidHeaderError(LoadError):
    def __init__(self, header: str, *, line: int | None = None) -> None:
        self.header = header
        super().__init__(f"invalid program header {header!r}", line=line)


class UnexpectedTokenError(LoadError):
    def __init__(self, token: str, *, line: int | None = None) -> None:
        self.token = token
        super().__init__(f'unexpected token "{token}"', line=line)


class DuplicateLabelError(LoadError):
    def __init__(self, label: str, *, line: int | None = None) -> None:
        self.label = label
        super().__init__(f'duplicate label "{label}"', line=line)


class SourceReadError(LoadError):
    pass


class ProgramError(Exception):
    """Raised while running a loaded program; aborts the current run only."""


class EmptyAccumulatorError(ProgramError):
    def __init__(self) -> None:
        super().__init__(
            "attempted to run an instruction that reads from the accumulator, "
            "but the accumulator is empty"
        )


class EndOfInputError(ProgramError):
    def __init__(self) -> None:
        super().__init__("attempted to read past the end of the input")


class UndefinedLabelError(ProgramError):
    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f'undefined label "{label}"')


class MaxCyclesExceededError(ProgramError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"maximum cycle count exceeded (limit {limit})")


class LevelError(ValueError):
    pass
