from __future__ import annotations

import logging
import sys

from checkers.config import LOG_FILE, LOG_LEVEL
from checkers.game.controller import run_game
from checkers.ui.keys import KeyReadError, read_key, terminal_session

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    if LOG_FILE:
        logging.basicConfig(
            filename=LOG_FILE,
            level=LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        # Keep stderr quiet while the board is on screen.
        logging.basicConfig(level=logging.WARNING)


def main() -> int:
    setup_logging()

    try:
        with terminal_session():
            return run_game(read_key)
    except KeyReadError as e:
        logger.error("error while getting input: %s", e)
        if LOG_FILE:
            print(f"error while getting input: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
