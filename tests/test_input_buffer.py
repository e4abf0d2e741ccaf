from portfolio_shell.input_buffer import InputBuffer


class TestEditing:
    def test_empty_initial_state(self):
        buf = InputBuffer()
        assert buf.text == ""
        assert buf.cursor == 0

    def test_initial_text_puts_cursor_at_end(self):
        buf = InputBuffer("help")
        assert buf.cursor == 4

    def test_insert_in_middle(self):
        buf = InputBuffer("hep")
        buf.move_to(2)
        buf.insert("l")
        assert buf.text == "help"
        assert buf.cursor == 3

    def test_insert_several_chars(self):
        buf = InputBuffer()
        buf.insert("cd ")
        assert buf.text == "cd "
        assert buf.cursor == 3

    def test_backspace_at_start_is_noop(self):
        buf = InputBuffer("ls")
        buf.move_home()
        buf.backspace()
        assert buf.text == "ls"
        assert buf.cursor == 0

    def test_backspace_in_middle(self):
        buf = InputBuffer("hxelp")
        buf.move_to(2)
        buf.backspace()
        assert buf.text == "help"
        assert buf.cursor == 1

    def test_delete_at_cursor(self):
        buf = InputBuffer("hexlp")
        buf.move_to(2)
        buf.delete()
        assert buf.text == "help"
        assert buf.cursor == 2

    def test_delete_at_end_is_noop(self):
        buf = InputBuffer("help")
        buf.delete()
        assert buf.text == "help"


class TestLateralMotion:
    """Motion only moves the offset, clamped to [0, len]."""

    def test_left_stops_at_zero(self):
        buf = InputBuffer("ab")
        for _ in range(5):
            buf.move_left()
        assert buf.cursor == 0
        assert buf.text == "ab"

    def test_right_stops_at_end(self):
        buf = InputBuffer("ab")
        buf.move_home()
        for _ in range(5):
            buf.move_right()
        assert buf.cursor == 2
        assert buf.text == "ab"

    def test_home_and_end(self):
        buf = InputBuffer("theme nord")
        buf.move_home()
        assert buf.cursor == 0
        buf.move_end()
        assert buf.cursor == 10

    def test_move_to_clamps(self):
        buf = InputBuffer("abc")
        buf.move_to(-4)
        assert buf.cursor == 0
        buf.move_to(99)
        assert buf.cursor == 3


class TestWordMotion:
    def test_word_left_from_end(self):
        buf = InputBuffer("cd web-development")
        buf.move_word_left()
        assert buf.cursor == 3

    def test_word_left_skips_spaces(self):
        buf = InputBuffer("cd   ai-ml")
        buf.move_to(5)
        buf.move_word_left()
        assert buf.cursor == 0

    def test_word_right_from_start(self):
        buf = InputBuffer("theme nord")
        buf.move_home()
        buf.move_word_right()
        assert buf.cursor == 5

    def test_word_right_at_end(self):
        buf = InputBuffer("theme")
        buf.move_word_right()
        assert buf.cursor == 5


class TestKill:
    def test_kill_word_back(self):
        buf = InputBuffer("theme dracula")
        buf.kill_word_back()
        assert buf.text == "theme "
        assert buf.cursor == 6

    def test_kill_word_back_at_start(self):
        buf = InputBuffer("ls")
        buf.move_home()
        buf.kill_word_back()
        assert buf.text == "ls"

    def test_kill_to_start(self):
        buf = InputBuffer("cd ai-ml")
        buf.move_to(3)
        buf.kill_to_start()
        assert buf.text == "ai-ml"
        assert buf.cursor == 0

    def test_kill_to_end(self):
        buf = InputBuffer("cd ai-ml")
        buf.move_to(2)
        buf.kill_to_end()
        assert buf.text == "cd"
        assert buf.cursor == 2


class TestReplaceAndTake:
    def test_replace_moves_cursor_to_end(self):
        buf = InputBuffer("x")
        buf.replace("history")
        assert buf.text == "history"
        assert buf.cursor == 7

    def test_replace_with_explicit_cursor(self):
        buf = InputBuffer()
        buf.replace("help ", 2)
        assert buf.cursor == 2

    def test_take_returns_and_clears(self):
        buf = InputBuffer("about")
        buf.move_to(2)
        assert buf.take() == "about"
        assert buf.text == ""
        assert buf.cursor == 0
