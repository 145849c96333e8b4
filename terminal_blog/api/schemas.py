"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from terminal_blog.entities.output import OutputBlock


class PostInfo(BaseModel):
    """Schema for a parsed post."""

    title: str = Field("", description="Frontmatter title, empty when absent")
    date: str = Field("", description="Frontmatter date (YYYY-MM-DD), empty when absent")
    body: str = Field(..., description="Markdown body without frontmatter")


class BlockInfo(BaseModel):
    """Schema for one output block."""

    kind: str = Field(..., description="intro, echo, text, listing, post or error")
    text: str = Field("", description="Plain text of the block")
    lines: List[str] = Field(default_factory=list, description="Listing lines")
    markup: str = Field("", description="HTML markup for post blocks")
    error: Optional[str] = Field(None, description="Error kind for error blocks")
    post: Optional[PostInfo] = Field(None, description="Parsed post for post blocks")

    @classmethod
    def from_entity(cls, block: OutputBlock):
        """Create a BlockInfo schema from an OutputBlock entity."""
        post = None
        if block.post is not None:
            post = PostInfo(
                title=block.post.title, date=block.post.date, body=block.post.body
            )
        return cls(
            kind=block.kind.value,
            text=block.text,
            lines=list(block.lines),
            markup=block.markup,
            error=block.error.value if block.error else None,
            post=post,
        )


class CommandRequest(BaseModel):
    """Schema for a command submission."""

    line: str = Field(..., description="Raw input line typed at the prompt")


class SessionResponse(BaseModel):
    """Schema for a session snapshot."""

    session_id: str = Field(..., description="Session identifier")
    prompt: str = Field(..., description="Prompt text for the next input")
    cwd: str = Field(..., description="Working directory label")
    blocks: List[BlockInfo] = Field(..., description="Output blocks")


class CommandResponse(SessionResponse):
    """Schema for the result of one command."""

    cleared: bool = Field(False, description="Whether the log was cleared")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
