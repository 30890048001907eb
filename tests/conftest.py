import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from checkers.game.actions import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP


class ScriptedKeys:
    """Key reader that replays a fixed list of raw codes."""

    def __init__(self, codes):
        self.codes = list(codes)

    def __call__(self):
        if not self.codes:
            raise AssertionError("ScriptedKeys ran out of keys")
        return self.codes.pop(0)


class RecordingPainter:
    def __init__(self):
        self.frames = []
        self.statuses = []

    def __call__(self, frame, status=""):
        self.frames.append(frame)
        self.statuses.append(status)


KEYS = {
    "up": KEY_UP,
    "down": KEY_DOWN,
    "left": KEY_LEFT,
    "right": KEY_RIGHT,
    "enter": KEY_ENTER,
    "esc": KEY_ESCAPE,
}


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def scripted():
    def make(*names):
        return ScriptedKeys(KEYS[n] if isinstance(n, str) else n for n in names)
    return make
