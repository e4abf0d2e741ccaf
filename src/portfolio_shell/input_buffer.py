from __future__ import annotations


class InputBuffer:
    """The unsubmitted prompt text and the cursor offset inside it.

    The offset always stays within ``[0, len(text)]``. Motion methods only
    move the offset; editing methods change the text at the offset.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self._text)))

    # --- Motion ---

    def move_to(self, offset: int):
        """Place the cursor at ``offset``, clamped to the buffer bounds."""
        self._cursor = self._clamp(offset)

    def move_left(self):
        self.move_to(self._cursor - 1)

    def move_right(self):
        self.move_to(self._cursor + 1)

    def move_home(self):
        self._cursor = 0

    def move_end(self):
        self._cursor = len(self._text)

    def _word_start_before(self, pos: int) -> int:
        while pos > 0 and self._text[pos - 1].isspace():
            pos -= 1
        while pos > 0 and not self._text[pos - 1].isspace():
            pos -= 1
        return pos

    def move_word_left(self):
        """Jump to the start of the word left of the cursor."""
        self._cursor = self._word_start_before(self._cursor)

    def move_word_right(self):
        """Jump past the end of the word right of the cursor."""
        pos = self._cursor
        end = len(self._text)
        while pos < end and self._text[pos].isspace():
            pos += 1
        while pos < end and not self._text[pos].isspace():
            pos += 1
        self._cursor = pos

    # --- Editing ---

    def insert(self, chars: str):
        """Insert ``chars`` at the cursor and advance past them."""
        before, after = self._text[: self._cursor], self._text[self._cursor :]
        self._text = before + chars + after
        self._cursor += len(chars)

    def backspace(self):
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def delete(self):
        if self._cursor >= len(self._text):
            return
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]

    def kill_word_back(self):
        start = self._word_start_before(self._cursor)
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start

    def kill_to_start(self):
        self._text = self._text[self._cursor :]
        self._cursor = 0

    def kill_to_end(self):
        self._text = self._text[: self._cursor]

    def replace(self, text: str, cursor: int | None = None):
        """Swap in new text. The cursor goes to the end unless given."""
        self._text = text
        self._cursor = len(text) if cursor is None else self._clamp(cursor)

    def take(self) -> str:
        """Empty the buffer, returning what it held."""
        text = self._text
        self.replace("", 0)
        return text
