from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT_MIN = -32768
INT_MAX = 32767


class IntValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["int"] = "int"
    value: int = Field(ge=INT_MIN, le=INT_MAX, strict=True)

    def __str__(self) -> str:
        return str(self.value)


# Every cell kind is a frozen model tagged by ``kind``. Only integers exist today.
Value = IntValue


def as_value(raw: Any) -> Value:
    if isinstance(raw, IntValue):
        return raw
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"cannot convert {raw!r} to a value")
    return IntValue(value=raw)


def _coerce_values(raw: Any) -> Any:
    if not isinstance(raw, (list, tuple)):
        return raw
    return [item if isinstance(item, dict) else as_value(item) for item in raw]


class Goals(BaseModel):
    size: int = Field(ge=0)
    speed: int = Field(ge=0)


class TestCase(BaseModel):
    __test__: ClassVar[bool] = False

    input: list[Value] = Field(default_factory=list)
    output: list[Value] = Field(default_factory=list)

    @field_validator("input", "output", mode="before")
    @classmethod
    def _coerce_ints(cls, v: Any) -> Any:
        return _coerce_values(v)


class Level(BaseModel):
    goals: Goals
    tests: list[TestCase] = Field(default_factory=list)
