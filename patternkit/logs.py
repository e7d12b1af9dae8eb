"""Four loggers of rising severity writing to different destinations."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def _formatter(prefix: str) -> logging.Formatter:
    return logging.Formatter(
        f"{prefix}%(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt=_DATE_FORMAT,
    )


def _logger(name: str, prefix: str, handlers: list[logging.Handler]) -> logging.Logger:
    log = logging.Logger(name, logging.DEBUG)
    log.propagate = False
    formatter = _formatter(prefix)
    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)
    return log


@dataclass
class Loggers:
    """Trace is discarded, info and warning go to stdout, error to a file and stderr."""

    trace: logging.Logger
    info: logging.Logger
    warning: logging.Logger
    error: logging.Logger

    def __enter__(self) -> "Loggers":
        return self

    def __exit__(self, *exc_info: object) -> None:
        for log in (self.trace, self.info, self.warning, self.error):
            for handler in list(log.handlers):
                handler.flush()
                handler.close()
                log.removeHandler(handler)


def make_loggers(
    error_path: str = "errors.txt",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> Loggers:
    """Build the four loggers; raise OSError if the error file cannot be opened."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    error_file = logging.FileHandler(error_path, mode="a", encoding="utf-8")
    return Loggers(
        trace=_logger("trace", "TRACE: ", [logging.NullHandler()]),
        info=_logger("info", "INFO: ", [logging.StreamHandler(out)]),
        warning=_logger("warning", "WARNING: ", [logging.StreamHandler(out)]),
        error=_logger(
            "error", "ERROR: ", [error_file, logging.StreamHandler(err)]
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Write one message at each level."""
    parser = argparse.ArgumentParser(
        prog="logs", description="Log one message at each severity."
    )
    parser.add_argument("--error-log", default="errors.txt")
    args = parser.parse_args(argv)

    try:
        loggers = make_loggers(args.error_log)
    except OSError as exc:
        print("Failed to open error log file:", exc, file=sys.stderr)
        return 1

    with loggers:
        loggers.trace.info("I have something standard to say")
        loggers.info.info("Special Information")
        loggers.warning.info("There is something you need to know about")
        loggers.error.info("Something has failed")
    return 0