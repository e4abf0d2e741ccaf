import pytest

from portfolio_shell.config import DEFAULT_WELCOME
from portfolio_shell.interpreter import create_interpreter, not_found_message
from portfolio_shell.navigator import HOME, Directory
from portfolio_shell.portfolio import Portfolio, Project, ProjectCategory
from portfolio_shell.types import Line, LineKind


def _make_portfolio():
    return Portfolio(
        projects=[
            ProjectCategory(
                name="web-development",
                title="Web Development",
                projects=[
                    Project(name="Trendora", description="Landing page"),
                    Project(name="Admin Dashboard", description="Inventory"),
                ],
            ),
            ProjectCategory(name="ai-ml", projects=[Project(name="RAG", description="Search")]),
        ]
    )


class FakeThemes:
    def __init__(self):
        self.current = "dark"
        self.switched = []

    def switch(self, name):
        self.switched.append(name)
        self.current = name


def _make_shell(**kwargs):
    themes = FakeThemes()
    shell = create_interpreter(
        _make_portfolio(),
        switch_theme=themes.switch,
        current_theme=lambda: themes.current,
        welcome=DEFAULT_WELCOME,
        **kwargs,
    )
    return shell, themes


def _texts(shell):
    return [line.text for line in shell.session.scrollback]


class TestSessionStart:
    def test_welcome_lines(self):
        shell, _ = _make_shell()
        assert shell.session.scrollback == (
            Line(LineKind.OUTPUT, "Welcome to My Portfolio Terminal"),
            Line(LineKind.OUTPUT, "Type 'help' for available commands"),
        )
        assert len(shell.session.history) == 0
        assert shell.session.path == HOME


class TestSubmit:
    @pytest.mark.parametrize("raw", ["help", "pwd", "ls", "theme", "about", "  skills  "])
    def test_growth_matches_output(self, raw):
        shell, _ = _make_shell()
        before = len(shell.session.scrollback)
        handler = shell.registry.get(raw.strip()).handler
        expected = len(handler(shell.context, []))
        shell.submit(raw)
        assert len(shell.session.history) == 1
        assert len(shell.session.scrollback) == before + 1 + expected

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_input_is_noop(self, raw):
        shell, _ = _make_shell()
        before = shell.session.scrollback
        shell.submit(raw)
        assert shell.session.scrollback == before
        assert len(shell.session.history) == 0

    def test_command_line_records_path(self):
        shell, _ = _make_shell()
        shell.submit("cd ai-ml")
        shell.submit("  pwd ")
        commands = [l for l in shell.session.scrollback if l.kind == LineKind.COMMAND]
        assert commands[0] == Line(LineKind.COMMAND, "cd ai-ml", path="home")
        assert commands[1] == Line(LineKind.COMMAND, "pwd", path="home/ai-ml")

    def test_history_stores_trimmed_text(self):
        shell, _ = _make_shell()
        shell.submit("  about  ")
        assert shell.session.history.entries == ("about",)

    def test_unknown_command(self):
        shell, _ = _make_shell()
        before = len(shell.session.scrollback)
        shell.submit("foo bar")
        new = shell.session.scrollback[before:]
        assert [l.kind for l in new] == [LineKind.COMMAND, LineKind.ERROR]
        assert new[1].text == "Command not found: foo. Type 'help' for available commands."
        assert not_found_message("foo") == new[1].text

    def test_command_name_case_insensitive(self):
        shell, _ = _make_shell()
        shell.submit("PWD")
        assert _texts(shell)[-1] == "home"

    def test_arguments_keep_case_by_default(self):
        shell, _ = _make_shell()
        shell.submit("cd Games")
        assert _texts(shell)[-2] == "Directory not found: Games"

    def test_lowercase_arguments_option(self):
        shell, _ = _make_shell(lowercase_arguments=True)
        shell.submit("cd Games")
        assert _texts(shell)[-2] == "Directory not found: games"

    def test_handler_exception_becomes_error_line(self):
        shell, _ = _make_shell()

        def boom(ctx, args):
            raise RuntimeError("kaput")

        shell.registry.register("boom", boom)
        shell.submit("boom")
        last = shell.session.scrollback[-1]
        assert last == Line(LineKind.ERROR, "boom: kaput")
        assert len(shell.session.history) == 1

    def test_submit_buffer_clears_buffer(self):
        shell, _ = _make_shell()
        shell.insert("help")
        shell.cursor_left()
        shell.submit_buffer()
        assert shell.session.buffer.text == ""
        assert shell.session.buffer.cursor == 0
        assert shell.session.history.entries == ("help",)

    def test_submit_buffer_with_unknown_command_still_clears(self):
        shell, _ = _make_shell()
        shell.insert("nope")
        shell.submit_buffer()
        assert shell.session.buffer.text == ""


class TestClear:
    def test_clear_empties_scrollback(self):
        shell, _ = _make_shell()
        shell.submit("help")
        shell.submit("clear")
        assert shell.session.scrollback == ()

    def test_clear_keeps_history(self):
        shell, _ = _make_shell()
        shell.submit("help")
        shell.submit("clear")
        assert shell.session.history.entries == ("help", "clear")

    def test_next_command_after_clear(self):
        shell, _ = _make_shell()
        shell.submit("clear")
        shell.submit("pwd")
        assert _texts(shell) == ["pwd", "home"]


class TestRecall:
    def test_previous_fills_buffer(self):
        shell, _ = _make_shell()
        for cmd in ("about", "skills", "pwd"):
            shell.submit(cmd)
        assert shell.recall_previous() == "pwd"
        assert shell.recall_previous() == "skills"
        assert shell.session.buffer.text == "skills"
        assert shell.session.buffer.cursor == 6

    def test_previous_pins_at_oldest(self):
        shell, _ = _make_shell()
        shell.submit("about")
        shell.submit("pwd")
        results = [shell.recall_previous() for _ in range(4)]
        assert results == ["pwd", "about", "about", "about"]

    def test_previous_on_empty_history(self):
        shell, _ = _make_shell()
        shell.insert("abc")
        assert shell.recall_previous() is None
        assert shell.session.buffer.text == "abc"

    def test_next_past_end_clears_buffer(self):
        shell, _ = _make_shell()
        shell.submit("about")
        shell.recall_previous()
        shell.recall_next()
        assert shell.session.buffer.text == ""
        assert not shell.session.history.browsing

    def test_next_when_not_browsing_keeps_buffer(self):
        shell, _ = _make_shell()
        shell.submit("about")
        shell.insert("draft")
        assert shell.recall_next() is None
        assert shell.session.buffer.text == "draft"

    def test_submit_resets_browse_cursor(self):
        shell, _ = _make_shell()
        shell.submit("about")
        shell.submit("pwd")
        shell.recall_previous()
        shell.recall_previous()
        shell.submit_buffer()
        assert not shell.session.history.browsing
        assert shell.recall_previous() == "about"


class TestCursor:
    def test_motion_never_edits(self):
        shell, _ = _make_shell()
        shell.insert("ls")
        shell.cursor_home()
        shell.cursor_left()
        assert shell.session.buffer.cursor == 0
        shell.cursor_end()
        shell.cursor_right()
        assert shell.session.buffer.cursor == 2
        assert shell.session.buffer.text == "ls"

    def test_editing_events(self):
        shell, _ = _make_shell()
        shell.insert("theme dracula")
        shell.kill_word_back()
        assert shell.session.buffer.text == "theme "
        shell.backspace()
        shell.word_left()
        shell.delete()
        assert shell.session.buffer.text == "heme"
        shell.kill_to_end()
        assert shell.session.buffer.text == ""


class TestNavigation:
    def test_cd_and_back(self):
        shell, _ = _make_shell()
        shell.submit("cd web-development")
        assert shell.session.path == Directory("web-development")
        shell.submit("cd ..")
        assert shell.session.path == HOME
        assert _texts(shell)[-1] == "Changed directory to home"

    def test_unknown_directory_keeps_path(self):
        shell, _ = _make_shell()
        shell.submit("cd ai-ml")
        shell.submit("cd nowhere")
        assert shell.session.path == Directory("ai-ml")

    def test_projects_inside_directory_matches_ls(self):
        shell, _ = _make_shell()
        shell.submit("cd web-development")
        shell.submit("ls")
        ls_lines = _texts(shell)[-2:]
        shell.submit("projects")
        assert _texts(shell)[-2:] == ls_lines
        assert ls_lines == ["1. Trendora - Landing page", "2. Admin Dashboard - Inventory"]


class TestTheme:
    def test_valid_theme_switches(self):
        shell, themes = _make_shell()
        shell.submit("theme Nord")
        assert themes.switched == ["nord"]
        assert _texts(shell)[-1] == "Theme switched to: nord"

    def test_invalid_theme(self):
        shell, themes = _make_shell()
        before = len(shell.session.scrollback)
        shell.submit("theme purple")
        assert themes.switched == []
        new = shell.session.scrollback[before + 1 :]
        assert len(new) == 1
        assert new[0].kind == LineKind.OUTPUT
        assert "purple" in new[0].text

    def test_missing_argument_is_usage_output(self):
        shell, themes = _make_shell()
        shell.submit("theme")
        assert shell.session.scrollback[-1] == Line(LineKind.OUTPUT, "Usage: theme <name>")
        assert themes.switched == []


class TestAutocomplete:
    def test_replacement_updates_buffer(self):
        shell, _ = _make_shell()
        shell.insert("hel")
        shell.autocomplete()
        assert shell.session.buffer.text == "help "
        assert shell.session.buffer.cursor == 5

    def test_suggestions_append_one_line(self):
        shell, _ = _make_shell()
        shell.insert("the")
        before = len(shell.session.scrollback)
        shell.autocomplete()
        assert shell.session.buffer.text == "the"
        assert shell.session.scrollback[before:] == (Line(LineKind.OUTPUT, "themes  theme"),)

    def test_completion_does_not_touch_history(self):
        shell, _ = _make_shell()
        shell.insert("cd a")
        shell.autocomplete()
        assert shell.session.buffer.text == "cd ai-ml"
        assert len(shell.session.history) == 0

    def test_no_match_changes_nothing(self):
        shell, _ = _make_shell()
        shell.insert("zzz")
        before = shell.session.scrollback
        assert shell.autocomplete() is None
        assert shell.session.scrollback == before
        assert shell.session.buffer.text == "zzz"


class TestHistoryCommand:
    def test_numbered_entries_include_itself(self):
        shell, _ = _make_shell()
        shell.submit("about")
        shell.submit("nope")
        shell.submit("history")
        assert _texts(shell)[-3:] == ["1  about", "2  nope", "3  history"]
