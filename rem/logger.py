"""
Logging setup for rem
Log records go to a dated file in the log directory; warnings and errors
are echoed to stderr. Stdout is left to the user-facing output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "rem"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[Union[str, Path]] = None,
                  level: Union[str, int] = logging.INFO) -> logging.Logger:
    """Configure the rem logger, replacing any handlers from a previous run"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.WARNING)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_dir is not None:
        # Create log filename with timestamp
        log_path = Path(log_dir)
        timestamp = datetime.now().strftime("%Y%m%d")
        try:
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                log_path / f"rem_{timestamp}.log", encoding='utf-8'
            )
        except OSError as e:
            logger.warning(f"File logging disabled: {e}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
