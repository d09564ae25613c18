"""Logging from config and env.

Reports own stdout, so log records always go to stderr. At INFO the
fetcher logs one summary line per report; DEBUG adds one line per page
request. urllib3 connection chatter is held at WARNING unless DEBUG is
asked for.

Configure via config.yaml (logging.level, logging.format) or env
(LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging
import sys

from prstats.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), LEVELS[DEFAULT_LEVEL])


class PrStatsLogging:
    """Configures the root logger from LoggingConfig."""

    def __init__(self, config: LoggingConfig) -> None:
        self.level = _resolve_level(config.level)
        self.format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Send records to stderr with the configured level and format."""
        logging.basicConfig(
            level=self.level,
            format=self.format,
            stream=sys.stderr,
            force=True,
        )
        third_party_level = logging.DEBUG if self.level <= logging.DEBUG else logging.WARNING
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(third_party_level)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)
