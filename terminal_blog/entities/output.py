"""
Output log domain entities.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from terminal_blog.entities.post import PostDocument


class BlockKind(Enum):
    INTRO = "intro"
    ECHO = "echo"
    TEXT = "text"
    LISTING = "listing"
    POST = "post"
    ERROR = "error"


class ErrorKind(Enum):
    UNKNOWN_COMMAND = "unknown_command"
    MISSING_ARGUMENT = "missing_argument"
    NO_SUCH_DIRECTORY = "no_such_directory"
    NO_SUCH_FILE = "no_such_file"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class OutputBlock:
    """One rendered block of the terminal output."""

    kind: BlockKind
    text: str = ""
    lines: tuple[str, ...] = ()
    post: PostDocument | None = None
    markup: str = ""
    error: ErrorKind | None = None

    @classmethod
    def failure(cls, error: ErrorKind, text: str) -> "OutputBlock":
        return cls(kind=BlockKind.ERROR, text=text, error=error)

    def plain_text(self) -> str:
        """Text form of the block, as printed by plain renderers."""
        if self.kind is BlockKind.LISTING:
            return "\n".join(self.lines)
        if self.kind is BlockKind.POST and self.post is not None:
            return self.post.body
        return self.text


@dataclass
class OutputLog:
    """Ordered, append-only sequence of output blocks."""

    _blocks: list[OutputBlock] = field(default_factory=list)

    def append(self, block: OutputBlock) -> None:
        self._blocks.append(block)

    def clear(self) -> None:
        self._blocks.clear()

    @property
    def blocks(self) -> list[OutputBlock]:
        return list(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[OutputBlock]:
        return iter(list(self._blocks))
