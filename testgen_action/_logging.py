"""
Logging for testgen_action.

The workflow modules (apply_tests, post_tests) log through module loggers and
the CLI decides where records go. The patch combiner is also called directly
as a library, so its debug chatter is opt-in and tagged with the file whose
fragments are being merged:

    lg = combine_logger(logger=logger, enabled=log, filename="tests/test_x.py")
    lg.debug("combined 2 fragments into 1 hunks")
    # -> "[tests/test_x.py] combined 2 fragments into 1 hunks"
"""
from __future__ import annotations

import logging
import sys
from typing import Union

COMBINE_LOGGER_NAME = "testgen_action.combine"


class SilentLogger:
    """Stand-in used when nobody asked for combine logging."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = debug


class TargetFileAdapter(logging.LoggerAdapter):
    """Prefix records with the target file of the patches being combined."""

    def process(self, msg, kwargs):
        return f"[{self.extra['filename']}] {msg}", kwargs


CombineLogger = Union[logging.Logger, logging.LoggerAdapter, SilentLogger]


def combine_logger(
    logger: CombineLogger | None = None,
    *,
    enabled: bool = False,
    filename: str | None = None,
) -> CombineLogger:
    """
    Pick the logger for one combine run.

    A caller-supplied `logger` wins. Otherwise `enabled` turns on the
    ``testgen_action.combine`` logger at DEBUG, and with neither the result
    swallows every call. A `filename` tags each record with the target file.
    """
    if logger is None and not enabled:
        return SilentLogger()
    if logger is None:
        logger = logging.getLogger(COMBINE_LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
    if filename is None or isinstance(logger, SilentLogger):
        return logger
    return TargetFileAdapter(logger, {"filename": filename})


def configure_cli_logging(debug: bool = False) -> None:
    """Send every record to stdout as a bare line, the way Actions logs read."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )
