"""
FastAPI dependency functions for retrieving services from the container.
"""

from terminal_blog.container import container
from terminal_blog.use_cases.terminal.registry import SessionRegistry


def get_session_registry() -> SessionRegistry:
    """
    Get the session registry from the container.

    Returns:
        SessionRegistry: The shared session registry
    """
    return container.get_session_registry()
