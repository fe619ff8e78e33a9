import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_def_logger = None

def get_logger(name: str = "scratchdir", logfile: Path | None = None, level: int | str = logging.INFO) -> logging.Logger:
    """Configure the package logger once per process.

    Library modules only ever log through ``logging.getLogger(__name__)``;
    handlers are attached here, by the CLI.
    """
    global _def_logger
    if _def_logger:
        return _def_logger

    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if logfile:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    _def_logger = logger
    return logger
