"""Structured errors raised while decoding api payloads."""
from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

__all__ = (
    "DecodeIssue",
    "MissingField",
    "TypeMismatch",
    "MalformedTimestamp",
    "ArrayElementFailure",
    "UnknownVariant",
    "DecodeError",
)


@dataclass(frozen=True)
class DecodeIssue(ABC):
    # dotted location in the payload, e.g. `beatmapset.beatmaps[2].id`
    path: str

    @abstractmethod
    def describe(self) -> str: ...

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.describe()}"


@dataclass(frozen=True)
class MissingField(DecodeIssue):
    field: str

    def describe(self) -> str:
        return f"missing required field {self.field!r}"


@dataclass(frozen=True)
class TypeMismatch(DecodeIssue):
    expected: str
    actual: str

    def describe(self) -> str:
        return f"expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class MalformedTimestamp(DecodeIssue):
    value: str

    def describe(self) -> str:
        return f"{self.value!r} is not an ISO-8601 timestamp"


@dataclass(frozen=True)
class ArrayElementFailure(DecodeIssue):
    index: int
    cause: DecodeIssue

    def describe(self) -> str:
        return f"element {self.index} failed: {self.cause.describe()}"

    def root_cause(self) -> DecodeIssue:
        cause = self.cause
        while isinstance(cause, ArrayElementFailure):
            cause = cause.cause
        return cause

    def __str__(self) -> str:
        # the root cause already carries the full path, indices included
        return str(self.root_cause())


@dataclass(frozen=True)
class UnknownVariant(DecodeIssue):
    """Recorded, never raised: an enum field carried a value we don't know."""

    enum: str
    value: Any

    def describe(self) -> str:
        return f"unknown {self.enum} value {self.value!r}"


class DecodeError(ValueError):
    """Raised when a payload does not satisfy an entity's field contract."""

    def __init__(self, model: str, issues: Sequence[DecodeIssue]) -> None:
        self.model = model
        self.issues = tuple(issues)

        lines = "\n".join(f"  {issue}" for issue in self.issues)
        super().__init__(f"failed to decode {model}:\n{lines}")

    @property
    def first(self) -> DecodeIssue:
        return self.issues[0]
