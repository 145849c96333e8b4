"""
Parsing of input lines into effects.
"""

from terminal_blog.entities.command import (
    ChangeDirectory,
    Clear,
    Command,
    Effect,
    Help,
    ListDirectory,
    MissingOperand,
    Noop,
    ReadFile,
    Unknown,
)

COMMAND_USAGE = {
    "help": ("help", "Show this help"),
    "clear": ("clear", "Clear the screen"),
    "ls": ("ls", "List the current directory"),
    "cd": ("cd <dir>", "Change directory (posts, .., ~)"),
    "cat": ("cat <name>", "Read a post"),
}
COMMAND_NAMES = tuple(COMMAND_USAGE)


def interpret(line: str) -> Effect:
    """
    Turn a raw input line into the effect it requests.

    Names match exactly and case-sensitively. cd and cat look at their
    first argument only; extra arguments are ignored.
    """
    command = Command.parse(line)
    if command is None:
        return Noop()
    if command.name not in COMMAND_NAMES:
        return Unknown(command.name)
    if command.name == "help":
        return Help()
    if command.name == "clear":
        return Clear()
    if command.name == "ls":
        return ListDirectory()
    if command.name == "cd":
        return ChangeDirectory(command.first_arg)
    if command.name == "cat":
        if not command.args:
            return MissingOperand("cat")
        return ReadFile(command.first_arg)
    return Unknown(command.name)
