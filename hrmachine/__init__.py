from __future__ import annotations

from hrmachine.errors import (
    DuplicateLabelError,
    EmptyAccumulatorError,
    EndOfInputError,
    InvalidHeaderError,
    LevelError,
    LoadError,
    MaxCyclesExceededError,
    MissingHeaderError,
    ProgramError,
    SourceReadError,
    UndefinedLabelError,
    UnexpectedTokenError,
)
from hrmachine.level import load_level, parse_level_text, parse_level_yaml
from hrmachine.ops import Inbox, Jump, Op, Opcode, Outbox, parse_op
from hrmachine.program import CYCLE_LIMIT, Program, RunResult
from hrmachine.schemas import Goals, IntValue, Level, TestCase, Value, as_value
from hrmachine.solution import HEADER, Solution, SolutionLoader, load_solution, load_solution_file
from hrmachine.verify import CaseResult, SolutionReport, all_passed, run_tests, score_solution

__all__ = [
    "__version__",
    # Values & level records
    "Value",
    "IntValue",
    "as_value",
    "Goals",
    "TestCase",
    "Level",
    # Instructions
    "Opcode",
    "Op",
    "Inbox",
    "Outbox",
    "Jump",
    "parse_op",
    # Loader
    "HEADER",
    "Solution",
    "SolutionLoader",
    "load_solution",
    "load_solution_file",
    # Engine
    "CYCLE_LIMIT",
    "Program",
    "RunResult",
    # Levels
    "load_level",
    "parse_level_text",
    "parse_level_yaml",
    # Verification
    "CaseResult",
    "SolutionReport",
    "run_tests",
    "all_passed",
    "score_solution",
    # Errors
    "LoadError",
    "MissingHeaderError",
    "InvalidHeaderError",
    "UnexpectedTokenError",
    "DuplicateLabelError",
    "SourceReadError",
    "ProgramError",
    "EmptyAccumulatorError",
    "EndOfInputError",
    "UndefinedLabelError",
    "MaxCyclesExceededError",
    "LevelError",
]

__version__ = "0.1.0"
