"""
Command and effect domain entities.

A typed line is parsed into a Command (name + positional args) and then
classified into exactly one Effect variant, which the terminal session
matches exhaustively.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Command:
    """A whitespace-split input line."""

    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, line: str) -> "Command | None":
        parts = line.split()
        if not parts:
            return None
        return cls(name=parts[0], args=tuple(parts[1:]))

    @property
    def first_arg(self) -> str:
        return self.args[0] if self.args else ""


@dataclass(frozen=True)
class Noop:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ListDirectory:
    pass


@dataclass(frozen=True)
class ChangeDirectory:
    arg: str = ""


@dataclass(frozen=True)
class ReadFile:
    arg: str


@dataclass(frozen=True)
class MissingOperand:
    name: str


@dataclass(frozen=True)
class Unknown:
    name: str


Effect = Union[
    Noop,
    Help,
    Clear,
    ListDirectory,
    ChangeDirectory,
    ReadFile,
    MissingOperand,
    Unknown,
]
