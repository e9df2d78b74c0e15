import logging
import os
import sys

from tic_tac_toe.game import Game
from tic_tac_toe.ui.terminal import TerminalUi

LOG_LEVEL_ENV_VAR = "TIC_TAC_TOE_LOG_LEVEL"

logger = logging.getLogger(__name__)


def main() -> None:
    _configure_logging(os.environ.get(LOG_LEVEL_ENV_VAR))

    ui = TerminalUi(Game())
    try:
        ui.run()
    except (KeyboardInterrupt, EOFError):
        logger.warning("Terminal input closed, aborting the game")
        sys.exit(1)


def _configure_logging(level: str | None) -> None:
    level_name = (level or "WARNING").upper()
    if level_name not in logging.getLevelNamesMapping():
        level_name = "WARNING"
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    main()
