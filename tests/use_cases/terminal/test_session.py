"""
Tests for the TerminalSession turn loop.
"""

import http.client
from unittest.mock import MagicMock

import pytest

from terminal_blog.entities.output import BlockKind, ErrorKind
from terminal_blog.entities.working_directory import WorkingDirectory
from terminal_blog.exceptions import ContentUnreachableError, SessionStateError
from terminal_blog.ports.content.content_store_port import ContentStorePort
from terminal_blog.use_cases.content.list_entries import ListEntriesUseCase
from terminal_blog.use_cases.content.read_post import ReadPostUseCase
from terminal_blog.use_cases.terminal.interpreter import COMMAND_NAMES
from terminal_blog.use_cases.terminal.session import TerminalSession


def _session_over(store, mock_logger) -> TerminalSession:
    s = TerminalSession(
        ListEntriesUseCase(store, logger=mock_logger),
        ReadPostUseCase(store, logger=mock_logger),
        logger=mock_logger,
    )
    s.start()
    return s


class TestTerminalSession:
    """Test cases for TerminalSession."""

    def test_start_shows_intro_and_opens_prompt(self, session):
        assert [b.kind for b in session.log] == [BlockKind.INTRO]
        assert session.prompt_open
        assert session.prompts_opened == 1
        assert session.prompt == "bigdaditor@blog:~$ "

    def test_submit_requires_open_prompt(self, content_store, mock_logger):
        s = TerminalSession(
            ListEntriesUseCase(content_store), ReadPostUseCase(content_store)
        )

        with pytest.raises(SessionStateError):
            s.submit("ls")

    def test_each_turn_echoes_and_reopens_prompt(self, session):
        blocks = session.submit("help")

        assert blocks[0].kind is BlockKind.ECHO
        assert blocks[0].text == "bigdaditor@blog:~$ help"
        assert blocks[1].kind is BlockKind.TEXT
        assert "Available commands" in blocks[1].text
        assert session.prompt_open
        assert session.prompts_opened == 2

    def test_empty_line_only_echoes(self, session):
        blocks = session.submit("   ")

        assert [b.kind for b in blocks] == [BlockKind.ECHO]
        assert session.prompt_open

    def test_unknown_command(self, session):
        blocks = session.submit("rm -rf /")

        assert blocks[-1].error is ErrorKind.UNKNOWN_COMMAND
        assert blocks[-1].text == "command not found: rm"
        assert session.prompt_open

    @pytest.mark.parametrize("history", [[], ["help"], ["ls", "cd posts", "cat hello"]])
    def test_clear_empties_log_and_leaves_one_prompt(self, session, history):
        for line in history:
            session.submit(line)

        blocks = session.submit("clear")

        assert blocks == []
        assert len(session.log) == 0
        assert session.prompt_open

    def test_cd_persists_across_turns(self, session):
        session.submit("cd posts")
        assert session.cwd is WorkingDirectory.POSTS
        assert session.prompt == "bigdaditor@blog:~/_posts$ "

        session.submit("help")
        assert session.cwd is WorkingDirectory.POSTS

        session.submit("cd ..")
        assert session.cwd is WorkingDirectory.ROOT

    def test_cd_unknown_keeps_directory(self, session):
        session.submit("cd posts")

        blocks = session.submit("cd nope")

        assert blocks[-1].error is ErrorKind.NO_SUCH_DIRECTORY
        assert blocks[-1].text == "cd: nope: No such directory"
        assert session.cwd is WorkingDirectory.POSTS

    def test_ls_at_root(self, session):
        blocks = session.submit("ls")

        assert blocks[-1].kind is BlockKind.LISTING
        assert blocks[-1].lines == ("about.md", "_posts/")

    def test_ls_in_posts_strips_names(self, session):
        session.submit("cd _posts")

        blocks = session.submit("ls")

        assert blocks[-1].lines == ("hello-world", "drafts/", "my-second-post")

    def test_ls_unreachable(self, mock_logger):
        store = MagicMock(spec=ContentStorePort)
        store.list_entries.side_effect = ContentUnreachableError("HTTP error 500: boom")
        s = _session_over(store, mock_logger)

        blocks = s.submit("ls")

        assert blocks[-1].error is ErrorKind.UNREACHABLE
        assert blocks[-1].text == "ls: cannot access: HTTP error 500: boom"
        assert s.prompt_open

    def test_cat_missing_operand_never_touches_store(self, mock_logger):
        store = MagicMock(spec=ContentStorePort)
        s = _session_over(store, mock_logger)

        blocks = s.submit("cat")

        assert blocks[-1].error is ErrorKind.MISSING_ARGUMENT
        assert blocks[-1].text == "cat: missing file operand"
        store.list_entries.assert_not_called()
        store.read_content.assert_not_called()

    def test_cat_reads_and_renders_post(self, session):
        blocks = session.submit("cat hello-world")

        post_block = blocks[-1]
        assert post_block.kind is BlockKind.POST
        assert post_block.post.title == "Hi"
        assert post_block.post.date == "2024-01-02"
        assert "<strong>bold</strong>" in post_block.markup
        assert "<em>em</em>" in post_block.markup

    def test_cat_does_not_depend_on_working_directory(self, session):
        session.submit("cd ~")

        blocks = session.submit("cat hello")

        assert blocks[-1].kind is BlockKind.POST

    def test_cat_no_such_file_leaves_state(self, session):
        session.submit("cd posts")
        before = len(session.log)

        blocks = session.submit("cat foo")

        assert blocks[-1].error is ErrorKind.NO_SUCH_FILE
        assert blocks[-1].text == "cat: foo: No such file"
        assert session.cwd is WorkingDirectory.POSTS
        assert len(session.log) == before + 2

    def test_cat_unreachable_on_fetch(self, session, content_store, monkeypatch):
        def _boom(entry):
            raise ContentUnreachableError("URL error: timed out")

        monkeypatch.setattr(content_store, "read_content", _boom)

        blocks = session.submit("cat hello")

        assert blocks[-1].error is ErrorKind.UNREACHABLE
        assert blocks[-1].text == "cat: hello: error reading file: URL error: timed out"
        assert session.prompt_open

    def test_unexpected_store_error_still_reopens_prompt(self, mock_logger):
        store = MagicMock(spec=ContentStorePort)
        store.list_entries.side_effect = RuntimeError("kaboom")
        s = _session_over(store, mock_logger)

        blocks = s.submit("cat hello")

        assert blocks[-1].error is ErrorKind.UNREACHABLE
        assert blocks[-1].text == "cat: hello: error reading file: kaboom"
        assert s.prompt_open
        mock_logger.error.assert_called()

    def test_truncated_post_body_reads_as_cat_error(
        self, session, content_store, monkeypatch
    ):
        def _truncated(entry):
            raise http.client.IncompleteRead(b"abc", 10)

        monkeypatch.setattr(content_store, "read_content", _truncated)

        blocks = session.submit("cat hello")

        assert blocks[-1].error is ErrorKind.UNREACHABLE
        assert blocks[-1].text.startswith("cat: hello: error reading file: ")
        assert session.prompt_open

    def test_help_lists_every_command(self, session):
        text = session.submit("help")[-1].text

        for name in COMMAND_NAMES:
            assert f"\n  {name}" in text

    def test_run_turn_snapshots_the_turn(self, session):
        turn = session.run_turn("cd posts")

        assert turn.cleared is False
        assert turn.prompt == "bigdaditor@blog:~/_posts$ "
        assert turn.cwd_label == "~/_posts"
        assert [b.kind for b in turn.blocks] == [BlockKind.ECHO]

    def test_run_turn_reports_clear(self, session):
        session.submit("help")

        turn = session.run_turn("clear")

        assert turn.cleared is True
        assert turn.blocks == []
