"""terminal_blog package: a personal blog browsed through a simulated terminal.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
