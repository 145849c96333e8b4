"""
FastAPI router definitions for the terminal session endpoints.
"""

from fastapi import APIRouter, HTTPException, Response

from terminal_blog.api.dependencies import get_session_registry
from terminal_blog.api.schemas import (
    BlockInfo,
    CommandRequest,
    CommandResponse,
    ErrorResponse,
    SessionResponse,
)
from terminal_blog.exceptions import SessionNotFoundError, SessionStateError

router = APIRouter()


@router.post("/sessions", response_model=SessionResponse, status_code=201)
def create_session():
    """
    Start a new terminal session.

    Returns:
        SessionResponse: The session id, first prompt and intro blocks
    """
    session_id, session = get_session_registry().create()
    blocks = session.start()
    return SessionResponse(
        session_id=session_id,
        prompt=session.prompt,
        cwd=session.cwd_label,
        blocks=[BlockInfo.from_entity(b) for b in blocks],
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_session(session_id: str):
    """
    Return the whole output log of a session.

    Raises:
        HTTPException: If the session does not exist
    """
    try:
        session = get_session_registry().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse(
        session_id=session_id,
        prompt=session.prompt,
        cwd=session.cwd_label,
        blocks=[BlockInfo.from_entity(b) for b in session.log],
    )


@router.post(
    "/sessions/{session_id}/commands",
    response_model=CommandResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def submit_command(session_id: str, request: CommandRequest):
    """
    Run one line in a session.

    Args:
        session_id: Target session
        request: The typed line

    Returns:
        CommandResponse: Blocks appended by the turn and the next prompt

    Raises:
        HTTPException: 404 for unknown sessions, 409 when no prompt is open
    """
    try:
        session = get_session_registry().get(session_id)
        turn = session.run_turn(request.line)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return CommandResponse(
        session_id=session_id,
        prompt=turn.prompt,
        cwd=turn.cwd_label,
        cleared=turn.cleared,
        blocks=[BlockInfo.from_entity(b) for b in turn.blocks],
    )


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def close_session(session_id: str):
    """End a session and drop its state."""
    try:
        get_session_registry().remove(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
