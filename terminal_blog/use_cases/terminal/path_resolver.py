"""
Resolution of cd targets against the current working directory.
"""

from typing import Optional

from terminal_blog.entities.working_directory import WorkingDirectory
from terminal_blog.exceptions import NoSuchDirectoryError

ROOT_TARGETS = frozenset({"", "~", ".."})
POSTS_TARGETS = frozenset({"posts", "_posts"})


def resolve(
    current: WorkingDirectory, arg: Optional[str], posts_dir: str = "_posts"
) -> WorkingDirectory:
    """
    Resolve a cd argument.

    Targets are absolute: the result never depends on ``current``, which is
    accepted so callers can treat resolution as a step of the session state.

    Args:
        current: The session's working directory
        arg: The cd argument, empty or None for a bare ``cd``
        posts_dir: Store name of the posts folder, also accepted as a target

    Returns:
        The new working directory

    Raises:
        NoSuchDirectoryError: If the target is not a known directory
    """
    target = (arg or "").strip()
    if target in ROOT_TARGETS:
        return WorkingDirectory.ROOT
    if target in POSTS_TARGETS or target == posts_dir:
        return WorkingDirectory.POSTS
    raise NoSuchDirectoryError(target)
