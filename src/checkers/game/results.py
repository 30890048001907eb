from __future__ import annotations
from enum import Enum


class TurnResult(Enum):
    CONTINUE = "continue"
    EXIT = "exit"
    IGNORED = "ignored"  # key had no meaning; frame was still redrawn
