from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    OUTPUT = "output"
    COMMAND = "command"
    ERROR = "error"


@dataclass(frozen=True)
class Line:
    kind: LineKind
    text: str
    path: str | None = None  # prompt path when the command was submitted


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
