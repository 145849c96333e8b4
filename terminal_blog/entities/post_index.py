"""
Post index domain entity.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PostIndexEntry:
    """One record of the generated posts index."""

    title: str
    date: str
    category: str
    file: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
