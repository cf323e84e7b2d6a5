"""
geo-what3words — Debug Log Sinks
=================================
Where the client's per-instance debug lines go.  A sink is chosen once, at
construction, from three variants:

* :class:`DisabledSink`: drop every line (the default).
* :class:`ConsoleSink`: write to standard output through a
  ``logging.StreamHandler``.
* :class:`CallbackSink`: hand each line to a caller-supplied function,
  e.g. to forward it into an application's own logger.

Every line is prefixed with :data:`LOG_PREFIX`.  Independently of the sink,
the client also writes to the standard ``geo_what3words.client`` logger.

Usage::

    client = What3WordsClient(api_key, log_sink=ConsoleSink())
    client = What3WordsClient(api_key, log_sink=CallbackSink(app_logger.info))
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TextIO

LOG_PREFIX = "geo-what3words -- "


class LogSink(ABC):
    """Abstract destination for client debug lines."""

    def log(self, message: str) -> None:
        """Prefix *message* and deliver it to the sink."""
        self.emit(LOG_PREFIX + message)

    @abstractmethod
    def emit(self, line: str) -> None:
        """Deliver an already-prefixed *line*."""


class DisabledSink(LogSink):
    def emit(self, line: str) -> None:
        return None


class ConsoleSink(LogSink):
    """Write lines to a text stream through a dedicated ``logging`` handler.

    Each sink owns a private, non-propagating logger with a
    :class:`logging.StreamHandler`; its lines never reach the root logger.

    Args:
        stream: Where to write.  ``None`` means ``sys.stdout`` as it is when
                the sink is created.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        # not registered with logging.getLogger, so it dies with the sink
        self._logger = logging.Logger("geo_what3words.console", logging.DEBUG)
        self._logger.addHandler(handler)
        self._logger.propagate = False

    def emit(self, line: str) -> None:
        self._logger.debug(line)


class CallbackSink(LogSink):
    """Forward lines to *callback*.

    Args:
        callback: Any single-argument callable, e.g. ``logger.info`` or
                  ``list.append``.
    """

    def __init__(self, callback: Callable[[str], object]) -> None:
        self.callback = callback

    def emit(self, line: str) -> None:
        self.callback(line)
