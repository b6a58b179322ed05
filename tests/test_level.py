from __future__ import annotations

from pathlib import Path

import pytest

from hrmachine.errors import LevelError
from hrmachine.level import load_level, parse_level_text, parse_level_yaml
from tests.helpers import values

LEVEL_TEXT = """
goals:
  size = 6
  speed = 6

tests:
  [ 3 9 4 ] -> [ 3 9 4 ]
  [ 1 2 3 ] -> [ 1 2 3 ]
"""


def test_parse_level_text() -> None:
    level = parse_level_text(LEVEL_TEXT)
    assert (level.goals.size, level.goals.speed) == (6, 6)
    assert len(level.tests) == 2
    assert level.tests[0].input == values(3, 9, 4)
    assert level.tests[1].output == values(1, 2, 3)


def test_parse_level_text_allows_empty_and_negative_sequences() -> None:
    level = parse_level_text("goals:\n size=1\n speed=2\ntests:\n [] -> [ -1 ]\n")
    assert level.tests[0].input == []
    assert level.tests[0].output == values(-1)


def test_parse_level_text_without_tests_section() -> None:
    level = parse_level_text("goals:\n size = 1\n speed = 2\n")
    assert level.tests == []


def test_parse_level_text_ignores_unknown_sections() -> None:
    level = parse_level_text("notes:\n size = 9\ngoals:\n size = 1\n speed = 2\n")
    assert level.goals.size == 1


def test_first_key_wins() -> None:
    level = parse_level_text("goals:\n size = 1\n size = 5\n speed = 2\n")
    assert level.goals.size == 1


def test_duplicate_section_rejected() -> None:
    with pytest.raises(LevelError, match="duplicate section"):
        parse_level_text("goals:\n size = 1\n speed = 2\ngoals:\n size = 1\n")


def test_missing_goals_rejected() -> None:
    with pytest.raises(LevelError, match="goals"):
        parse_level_text("tests:\n [ 1 ] -> [ 1 ]\n")
    with pytest.raises(LevelError, match="size and speed"):
        parse_level_text("goals:\n size = 1\n")


def test_statement_outside_section_rejected() -> None:
    with pytest.raises(LevelError, match="outside of a section"):
        parse_level_text("size = 1\n")


def test_unexpected_statement_rejected() -> None:
    with pytest.raises(LevelError, match="line 3"):
        parse_level_text("goals:\n size = 1\n [ 1 -> 2 ]\n")


def test_invalid_number_rejected() -> None:
    with pytest.raises(LevelError, match="invalid number"):
        parse_level_text("goals:\n size = 1\n speed = 1\ntests:\n [ a ] -> [ ]\n")


def test_out_of_range_value_rejected() -> None:
    with pytest.raises(LevelError, match="invalid level"):
        parse_level_text("goals:\n size = 1\n speed = 1\ntests:\n [ 40000 ] -> [ ]\n")


def test_parse_level_yaml() -> None:
    level = parse_level_yaml(
        "goals:\n  size: 2\n  speed: 4\ntests:\n  - input: [5, 6]\n    output: [5, 6]\n"
    )
    assert (level.goals.size, level.goals.speed) == (2, 4)
    assert level.tests[0].input == values(5, 6)


def test_parse_level_yaml_requires_mapping() -> None:
    with pytest.raises(LevelError, match="YAML mapping"):
        parse_level_yaml("- 1\n- 2\n")
    with pytest.raises(LevelError, match="goals"):
        parse_level_yaml("tests: []\n")


def test_parse_level_yaml_validates_fields() -> None:
    with pytest.raises(LevelError, match="invalid level"):
        parse_level_yaml("goals:\n  size: -1\n  speed: 4\n")


def test_load_level_dispatches_on_suffix(tmp_path: Path) -> None:
    text_path = tmp_path / "01.level"
    text_path.write_text(LEVEL_TEXT, encoding="utf-8")
    yaml_path = tmp_path / "01.yaml"
    yaml_path.write_text(
        "goals: {size: 6, speed: 6}\n"
        "tests:\n"
        "  - {input: [3, 9, 4], output: [3, 9, 4]}\n"
        "  - {input: [1, 2, 3], output: [1, 2, 3]}\n",
        encoding="utf-8",
    )
    assert load_level(text_path) == load_level(yaml_path)


def test_parse_level_yaml_rejects_malformed_yaml() -> None:
    with pytest.raises(LevelError, match="invalid YAML"):
        parse_level_yaml("goals: {size: 1\n")


def test_load_level_rejects_non_utf8(tmp_path: Path) -> None:
    p = tmp_path / "bad.level"
    p.write_bytes(b"goals:\n size = 1\xff\n")
    with pytest.raises(LevelError, match="not valid UTF-8"):
        load_level(p)
