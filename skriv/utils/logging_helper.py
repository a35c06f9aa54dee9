#!/usr/bin/env python
"""
logging_helper.py – one-call setup: file + stdout.

Usage:
    from skriv.utils.logging_helper import get_logger
    log = get_logger()                  # name from caller's module
    log = get_logger("i18n")            # shared channel, logs/i18n.log
    log.info("It works")

Environment:
    SKRIV_LOG_LEVEL   default level (INFO)
    SKRIV_LOG_FILE    set to 0 to skip the logs/<name>.log file handler
"""

from __future__ import annotations
import inspect, logging, sys, os
from pathlib import Path

from .paths import LOG_DIR

DEF_FMT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"
ROOT_NAME = "skriv"


def _level_from(name: str | int | None) -> int:
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _caller_name() -> str:
    caller = inspect.stack()[2]
    module = inspect.getmodule(caller[0])
    if module and module.__name__ != "__main__":
        return module.__name__.split(".")[-1]
    # run as a script: file-stem (e.g., analyze_text)
    return os.path.splitext(os.path.basename(caller.filename))[0]


def get_logger(name: str | None = None,
               level: int | str | None = None,
               log_dir: str | Path = LOG_DIR) -> logging.Logger:
    """
    Create (or return existing) logger ``skriv.<name>``. Without *name* the
    caller's module name is used (e.g. 'catalog'). Writes to
    logs/<name>.log and echoes ``[LEVEL] message`` to stdout.
    """
    name = name or _caller_name()
    logger = logging.getLogger(f"{ROOT_NAME}.{name}")
    if logger.handlers:                 # already initialised
        return logger

    level = _level_from(level if level is not None else os.getenv("SKRIV_LOG_LEVEL"))
    logger.setLevel(level)

    if os.getenv("SKRIV_LOG_FILE", "1") != "0":
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(Path(log_dir) / f"{name}.log", encoding="utf-8")
        fh.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))
        logger.addHandler(fh)

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(ch)

    logger.propagate = False
    return logger


def set_level(level: int | str) -> None:
    """Change the level of every skriv logger created so far (CLI --log-level)."""
    level = _level_from(level)
    prefix = ROOT_NAME + "."
    for logger_name, logger in logging.root.manager.loggerDict.items():
        if logger_name.startswith(prefix) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
