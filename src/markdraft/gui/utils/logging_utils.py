"""
Route records from the ``markdraft`` logger tree into the console pane.

The drafting core logs through the standard ``logging`` module and knows
nothing about Qt. The main window attaches a QueueLogHandler to the
package logger, and after every key event it drains the queue into the
ConsoleWidget.
"""

from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import List, Optional, Tuple

LogLine = Tuple[str, str]


class QueueLogHandler(logging.Handler):
    """Put (message, level name) pairs on a queue for the console pane."""

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    @staticmethod
    def display_level(record: logging.LogRecord) -> str:
        # The console has no DEBUG colour
        return "INFO" if record.levelno <= logging.DEBUG else record.levelname

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), self.display_level(record)))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = None) -> QueueLogHandler:
    """
    Install a QueueLogHandler on logger_name (root logger when None).

    Returns:
        The handler, for detach_queue_handler()
    """
    handler = QueueLogHandler(log_queue)
    logging.getLogger(logger_name).addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = None) -> None:
    logging.getLogger(logger_name).removeHandler(handler)


def drain_queue(log_queue: Queue) -> List[LogLine]:
    """Pop every pending line without blocking."""
    lines: List[LogLine] = []
    while True:
        try:
            lines.append(log_queue.get_nowait())
        except Empty:
            return lines
