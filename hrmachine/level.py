from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from hrmachine.errors import LevelError
from hrmachine.schemas import Goals, Level, TestCase

_SECTION_RE = re.compile(r"(?P<name>[A-Za-z]+):")
_KEY_VALUE_RE = re.compile(r"(?P<key>[A-Za-z]+)\s*=\s*(?P<value>\d+)")
_TEST_CASE_RE = re.compile(r"\[(?P<input>[^\[\]]*)\]\s*->\s*\[(?P<output>[^\[\]]*)\]")

YAML_SUFFIXES = {".yml", ".yaml"}


def _sequence(raw: str, *, lineno: int) -> list[int]:
    items: list[int] = []
    for tok in raw.split():
        try:
            items.append(int(tok))
        except ValueError:
            raise LevelError(f"line {lineno}: invalid number {tok!r}") from None
    return items


def _get_value(section: list[Any], key: str) -> int | None:
    for stmt in section:
        if isinstance(stmt, tuple) and stmt[0] == key:
            return stmt[1]
    return None


def parse_level_text(text: str) -> Level:
    """Parse the sectioned level format.

    Example::

        goals:
          size = 2
          speed = 6
        tests:
          [ 1 2 3 ] -> [ 1 2 3 ]
    """
    sections: dict[str, list[Any]] = {}
    current: list[Any] | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        m = _SECTION_RE.fullmatch(line)
        if m is not None:
            name = m.group("name")
            if name in sections:
                raise LevelError(f"line {lineno}: duplicate section {name!r}")
            current = sections[name] = []
            continue

        if current is None:
            raise LevelError(f"line {lineno}: statement outside of a section: {line!r}")

        m = _KEY_VALUE_RE.fullmatch(line)
        if m is not None:
            current.append((m.group("key"), int(m.group("value"))))
            continue

        m = _TEST_CASE_RE.fullmatch(line)
        if m is not None:
            current.append(
                {
                    "input": _sequence(m.group("input"), lineno=lineno),
                    "output": _sequence(m.group("output"), lineno=lineno),
                }
            )
            continue

        raise LevelError(f"line {lineno}: unexpected statement {line!r}")

    goals_section = sections.get("goals")
    if goals_section is None:
        raise LevelError("level is missing a goals section")
    size = _get_value(goals_section, "size")
    speed = _get_value(goals_section, "speed")
    if size is None or speed is None:
        raise LevelError("goals must define size and speed")

    raw_tests = [stmt for stmt in sections.get("tests", []) if isinstance(stmt, dict)]
    try:
        return Level(
            goals=Goals(size=size, speed=speed),
            tests=[TestCase.model_validate(t) for t in raw_tests],
        )
    except ValidationError as e:
        raise LevelError(f"invalid level: {e}") from e


def parse_level_yaml(text: str) -> Level:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LevelError(f"invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise LevelError("level must be a YAML mapping")
    if "goals" not in data:
        raise LevelError("level is missing a goals section")
    raw_tests = data.get("tests") or []
    if not isinstance(raw_tests, list):
        raise LevelError("level.tests must be a list")
    try:
        return Level.model_validate({"goals": data["goals"], "tests": raw_tests})
    except ValidationError as e:
        raise LevelError(f"invalid level: {e}") from e


def load_level(path: Path) -> Level:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LevelError(f"level is not valid UTF-8: {e}") from e
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_level_yaml(text)
    return parse_level_text(text)
