from __future__ import annotations

NOT_BROWSING = -1


class CommandHistory:
    """Submitted command lines plus an up/down browse cursor.

    Every non-empty submission is kept, duplicates included, so the
    ``history`` command can number them exactly as they were typed.
    """

    def __init__(self):
        self._entries: list[str] = []
        self._index = NOT_BROWSING

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def browsing(self) -> bool:
        return self._index != NOT_BROWSING

    def add(self, cmd: str):
        """Record a submitted command and stop browsing."""
        if not cmd.strip():
            return
        self._entries.append(cmd)
        self.reset()

    def reset(self):
        self._index = NOT_BROWSING

    def previous(self) -> str | None:
        """Step to an older entry. Returns None when there is nothing to recall."""
        if not self._entries:
            return None
        if self._index == NOT_BROWSING:
            self._index = len(self._entries) - 1
        else:
            self._index = max(0, self._index - 1)
        return self._entries[self._index]

    def next(self) -> str | None:
        """Step to a newer entry.

        Returns None when not browsing. Stepping past the newest entry stops
        browsing and returns an empty string, so the caller blanks the prompt.
        """
        if self._index == NOT_BROWSING:
            return None
        self._index += 1
        if self._index >= len(self._entries):
            self.reset()
            return ""
        return self._entries[self._index]
