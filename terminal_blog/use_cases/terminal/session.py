"""
Terminal session: the prompt/output loop state machine.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from typing_extensions import assert_never

from terminal_blog.entities.command import (
    ChangeDirectory,
    Clear,
    Effect,
    Help,
    ListDirectory,
    MissingOperand,
    Noop,
    ReadFile,
    Unknown,
)
from terminal_blog.entities.output import BlockKind, ErrorKind, OutputBlock, OutputLog
from terminal_blog.entities.working_directory import WorkingDirectory
from terminal_blog.exceptions import (
    ContentStoreError,
    NoSuchDirectoryError,
    SessionStateError,
)
from terminal_blog.use_cases.content.list_entries import ListEntriesUseCase
from terminal_blog.use_cases.content.read_post import (
    Err,
    Ok,
    ReadFailure,
    ReadPostUseCase,
)
from terminal_blog.use_cases.terminal.interpreter import COMMAND_USAGE, interpret
from terminal_blog.use_cases.terminal.path_resolver import resolve
from terminal_blog.utils.markdown import MarkdownRenderer

HELP_TEXT = "\n".join(
    ["Available commands:"]
    + [f"  {usage:<14}{summary}" for usage, summary in COMMAND_USAGE.values()]
)

INTRO_TEXT = "Welcome to the blog of {user}.\nType 'help' to get started!"


@dataclass(frozen=True)
class TurnResult:
    """What one turn appended, and the prompt it left open."""

    blocks: list[OutputBlock]
    cleared: bool
    prompt: str
    cwd_label: str


class TerminalSession:
    """
    One terminal session.

    Owns the output log, the working directory and the prompt state. Each
    call to submit() is one turn: the open prompt is consumed, the line is
    interpreted and run to completion, results are appended, and a new
    prompt is opened whatever happened.
    """

    def __init__(
        self,
        list_entries: ListEntriesUseCase,
        read_post: ReadPostUseCase,
        renderer: Optional[MarkdownRenderer] = None,
        posts_dir: str = "_posts",
        user: str = "bigdaditor",
        host: str = "blog",
        logger: Optional[logging.Logger] = None,
    ):
        self._list_entries = list_entries
        self._read_post = read_post
        self._renderer = renderer or MarkdownRenderer()
        self._posts_dir = posts_dir
        self._user = user
        self._host = host
        self._logger = logger or logging.getLogger(__name__)

        self.log = OutputLog()
        self.cwd = WorkingDirectory.ROOT
        self.prompt_open = False
        self.prompts_opened = 0
        self._turn_lock = threading.Lock()

    # ---------------- lifecycle ----------------
    def start(self) -> list[OutputBlock]:
        """Reset the log, show the intro and open the first prompt."""
        with self._turn_lock:
            self.log.clear()
            intro = OutputBlock(
                kind=BlockKind.INTRO, text=INTRO_TEXT.format(user=self._user)
            )
            self.log.append(intro)
            self._open_prompt()
            return [intro]

    @property
    def cwd_label(self) -> str:
        return self.cwd.label(self._posts_dir)

    @property
    def prompt(self) -> str:
        return f"{self._user}@{self._host}:{self.cwd_label}$ "

    def _open_prompt(self) -> None:
        self.prompt_open = True
        self.prompts_opened += 1

    # ---------------- turns ----------------
    def submit(self, line: str) -> list[OutputBlock]:
        """
        Run one input line.

        Args:
            line: Text captured from the open prompt

        Returns:
            Blocks appended by this turn (empty after clear)

        Raises:
            SessionStateError: If no prompt is open
        """
        return self.run_turn(line).blocks

    def run_turn(self, line: str) -> TurnResult:
        """Run one input line and snapshot the state it leaves behind."""
        with self._turn_lock:
            if not self.prompt_open:
                raise SessionStateError("No prompt is open for input")
            self.prompt_open = False

            line = line.strip()
            effect = interpret(line)
            appended: list[OutputBlock] = []
            if not isinstance(effect, Clear):
                appended.append(
                    OutputBlock(kind=BlockKind.ECHO, text=f"{self.prompt}{line}")
                )
            try:
                appended.extend(self._run(effect))
            except Exception as e:
                self._logger.error(f"Unexpected error running {line!r}: {e}")
                appended.append(
                    OutputBlock.failure(ErrorKind.UNREACHABLE, f"error: {e}")
                )
            finally:
                for block in appended:
                    self.log.append(block)
                self._open_prompt()
            return TurnResult(
                blocks=appended,
                cleared=isinstance(effect, Clear),
                prompt=self.prompt,
                cwd_label=self.cwd_label,
            )

    def _run(self, effect: Effect) -> list[OutputBlock]:
        if isinstance(effect, Noop):
            return []
        if isinstance(effect, Help):
            return [OutputBlock(kind=BlockKind.TEXT, text=HELP_TEXT)]
        if isinstance(effect, Clear):
            self.log.clear()
            return []
        if isinstance(effect, ListDirectory):
            return [self._ls()]
        if isinstance(effect, ChangeDirectory):
            return self._cd(effect.arg)
        if isinstance(effect, ReadFile):
            return [self._cat(effect.arg)]
        if isinstance(effect, MissingOperand):
            return [
                OutputBlock.failure(
                    ErrorKind.MISSING_ARGUMENT, f"{effect.name}: missing file operand"
                )
            ]
        if isinstance(effect, Unknown):
            return [
                OutputBlock.failure(
                    ErrorKind.UNKNOWN_COMMAND, f"command not found: {effect.name}"
                )
            ]
        assert_never(effect)

    def _cd(self, arg: str) -> list[OutputBlock]:
        try:
            self.cwd = resolve(self.cwd, arg, self._posts_dir)
        except NoSuchDirectoryError as e:
            return [
                OutputBlock.failure(
                    ErrorKind.NO_SUCH_DIRECTORY, f"cd: {e.target}: No such directory"
                )
            ]
        return []

    def _ls(self) -> OutputBlock:
        try:
            lines = self._list_entries.execute(self.cwd)
        except ContentStoreError as e:
            return OutputBlock.failure(
                ErrorKind.UNREACHABLE, f"ls: cannot access: {e}"
            )
        return OutputBlock(kind=BlockKind.LISTING, lines=tuple(lines))

    def _cat(self, name: str) -> OutputBlock:
        result = self._read_post.execute(name)
        if isinstance(result, Err):
            if result.failure is ReadFailure.NOT_FOUND:
                return OutputBlock.failure(
                    ErrorKind.NO_SUCH_FILE, f"cat: {name}: No such file"
                )
            return OutputBlock.failure(
                ErrorKind.UNREACHABLE,
                f"cat: {name}: error reading file: {result.message}",
            )
        if isinstance(result, Ok):
            return OutputBlock(
                kind=BlockKind.POST,
                text=result.post.title or result.entry.title_name(),
                post=result.post,
                markup=self._renderer.render(result.post.body),
            )
        assert_never(result)
