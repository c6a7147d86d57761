import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


class LogWithTqdm(logging.Handler):
    """
    A logging handler that writes through `tqdm.write()`, so log lines
    emitted during a batch run do not break the progress bar.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Union[str, int, None], fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level if isinstance(level, int) else fallback


def configure_logger(
        general_level: Union[str, int, None] = 'INFO',
        module_specific_levels: Optional[Dict[str, Union[str, int]]] = None,
        silenced_loggers: Optional[Dict[str, Union[str, int]]] = None,
) -> None:
    """
    Configures the root logger with a tqdm-friendly handler and applies
    per-module levels. Unknown level names fall back to INFO
    (CRITICAL for silenced loggers).
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))

    # Replace whatever handlers a previous call (or a library) installed.
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    # Muzzle noisy loggers by setting their level high.
    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))
