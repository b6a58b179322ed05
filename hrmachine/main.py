from __future__ import annotations

import argparse
import logging
from pathlib import Path

from hrmachine.config import MachineSettings, load_settings
from hrmachine.errors import LevelError, LoadError, ProgramError
from hrmachine.level import load_level
from hrmachine.program import Program
from hrmachine.schemas import Level, Value, as_value
from hrmachine.solution import Solution, load_solution_file
from hrmachine.verify import SolutionReport, score_solution

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _value(raw: str) -> Value:
    try:
        return as_value(int(raw))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value: {raw}") from None


def _format_values(values: list[Value] | None) -> str:
    if values is None:
        return "-"
    return "[" + ", ".join(str(v) for v in values) + "]"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_solution(path: Path) -> Solution:
    try:
        return load_solution_file(path)
    except LoadError as e:
        raise SystemExit(f"{path}: {e}") from e


def _load_level(path: Path) -> Level:
    try:
        return load_level(path)
    except (LevelError, OSError) as e:
        raise SystemExit(f"{path}: {e}") from e


def _print_report(*, report: SolutionReport) -> None:
    goals = report.goals
    for r in report.results:
        print(f"Test {r.index + 1}: {'PASS' if r.passed else 'FAIL'}")
        if r.error is not None:
            print(f"  Error: {r.error}")
        else:
            print(f"  Outbox: {_format_values(r.output)}")
            if not r.passed:
                print(f"  Expected: {_format_values(r.expected)}")
            print(f"  Cycles: {r.cycles} [goal {goals.speed}]")

    speed = "-" if report.speed is None else f"{report.speed:.2f}"
    print(
        f"\nInstructions: {report.size} [goal {goals.size}] "
        f"size_goal={'met' if report.size_goal_met else 'missed'}"
    )
    print(
        f"Speed: {speed} [goal {goals.speed}] "
        f"speed_goal={'met' if report.speed_goal_met else 'missed'}"
    )
    print("Success!" if report.passed else "Failed.")


def _add_common_args(p: argparse.ArgumentParser, *, settings: MachineSettings) -> None:
    p.add_argument("--program", type=_existing_path, required=True, help="HRM program file")
    p.add_argument(
        "--cycle-limit",
        type=int,
        default=settings.cycle_limit,
        help="abort a run after this many cycles (default: HRM_CYCLE_LIMIT or 1000)",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level if settings.log_level in LOG_LEVELS else "WARNING",
    )


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"configuration error: {e}") from e

    parser = argparse.ArgumentParser(prog="hrm")
    sub = parser.add_subparsers(dest="cmd", required=True)

    check_p = sub.add_parser("check", help="load a program and print its size and labels")
    _add_common_args(check_p, settings=settings)

    run_p = sub.add_parser("run", help="run a program once against the given input")
    _add_common_args(run_p, settings=settings)
    run_p.add_argument("--input", type=_value, nargs="*", default=[], help="inbox values")

    verify_p = sub.add_parser("verify", help="run a program against every test of a level")
    _add_common_args(verify_p, settings=settings)
    verify_p.add_argument("--level", type=_existing_path, required=True, help="level file")

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    if args.cycle_limit < 1:
        parser.error("--cycle-limit must be >= 1")

    solution = _load_solution(args.program)

    if args.cmd == "check":
        print(f"Instructions: {len(solution)}")
        for name, addr in sorted(solution.labels.items(), key=lambda kv: (kv[1], kv[0])):
            print(f"- {name}: {addr}")
        return 0

    if args.cmd == "run":
        program = Program(solution, cycle_limit=args.cycle_limit)
        try:
            result = program.run(args.input)
        except ProgramError as e:
            raise SystemExit(f"error: {e}") from e
        print(f"Outbox: {_format_values(result.output)}")
        print(f"Cycles: {result.cycles}")
        return 0

    if args.cmd == "verify":
        level = _load_level(args.level)
        report = score_solution(solution=solution, level=level, cycle_limit=args.cycle_limit)
        _print_report(report=report)
        return 0 if report.passed else 1

    raise AssertionError(f"unhandled cmd: {args.cmd}")
