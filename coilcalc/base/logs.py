# SPDX-FileCopyrightText: 2021-present M. Coleman, J. Cook, F. Franza
# SPDX-FileCopyrightText: 2021-present I.A. Maione, S. McIntosh
# SPDX-FileCopyrightText: 2021-present J. Morris, D. Short
#
# SPDX-License-Identifier: LGPL-2.1-or-later


"""Logging system setup and control."""

from __future__ import annotations

import logging
from enum import Enum
from types import DynamicClassAttribute
from typing import TYPE_CHECKING

from rich import default_styles
from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.panel import Panel

from coilcalc.base.error import LogsError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.traceback import Traceback


class LogLevel(Enum):
    """Linking level names and corresponding numbers."""

    CRITICAL = (5, "darkred")
    ERROR = (4, "red")
    WARNING = (3, "orange")
    INFO = (2, "blue")
    DEBUG = (1, "green")
    NOTSET = (0, None)

    def __new__(cls, *args, **kwds):
        """Create Enum from first half of tuple"""
        obj = object.__new__(cls)
        obj._value_ = args[0]
        return obj

    def __init__(self, _, colour: str | None = ""):
        self.colour = colour

    @classmethod
    def _missing_(cls, value: int | str) -> LogLevel:
        if isinstance(value, int):
            if cls.CRITICAL.value < value < 10:  # noqa: PLR2004
                return cls.CRITICAL
            value = max(value // 10 + value % 10, 0)
            if value <= cls.CRITICAL.value:
                return cls(value)
            return cls.CRITICAL
        try:
            return cls[value.upper()]
        except (KeyError, AttributeError):
            raise LogsError(
                f"Unknown severity level: {value}. Choose from: {(*cls._member_names_,)}"
            ) from None

    @DynamicClassAttribute
    def value_for_logging(self) -> int:
        """Return builtin logging level value"""
        return int(self.value * 10)


class LoggerAdapter(logging.Logger):
    """Adapt the base logging class for our uses"""

    _clean: bool = False

    def makeRecord(self, *args, **kwargs) -> logging.LogRecord:  # noqa: N802
        """Overridden makeRecord to pass variables to handler"""
        record = super().makeRecord(*args, **kwargs)
        record._clean = self._clean
        return record

    def clean(
        self,
        msg: str,
        loglevel: str | LogLevel = LogLevel.INFO,
        *args,
        **kwargs,
    ):
        """Unmodified logging"""
        func = getattr(super(), LogLevel(loglevel).name.lower())
        self._clean = True
        try:
            func(msg.strip(), *args, stacklevel=kwargs.pop("stacklevel", 3), **kwargs)
        finally:
            self._clean = False


class CoilcalcRichHandler(RichHandler):
    """
    Rich handler boxing warnings and errors in a panel
    """

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Rich handler rendering in a panel for WARNING and above

        Returns
        -------
        :
            The text to be rendered by the logger
        """
        log_renderable = super().render(
            record=record,
            traceback=traceback,
            message_renderable=message_renderable,
        )
        if getattr(record, "_clean", True) or record.levelno < logging.WARNING:
            return log_renderable
        return Panel(
            log_renderable,
            border_style=default_styles.DEFAULT_STYLES[
                f"logging.level.{record.levelname.lower()}"
            ],
        )


class CoilcalcRichFileHandler(CoilcalcRichHandler):
    """Allow some filtering on file log handlers"""


def logger_setup(
    logfilename: str | None = None, *, level: str | int = "INFO"
) -> logging.Logger:
    """
    Create logger with screen handlers and an optional file handler.

    Parameters
    ----------
    logfilename:
        Name of file to write logs to, default = no file output
    level:
        The initial logging level to be printed to the console, default = INFO.

    Returns
    -------
    :
        The logger object.

    Notes
    -----
    The coilcalc logger itself is set to debug, the handlers filter.
    Calling this more than once does not duplicate the screen handlers.
    """
    logging.setLoggerClass(LoggerAdapter)
    root_logger = logging.getLogger("")
    cc_logger = logging.getLogger("coilcalc")

    handler_names = {handler.name for handler in root_logger.handlers}

    # what will be shown on screen
    if "CC stream stdout" not in handler_names:
        on_screen_handler_out = CoilcalcRichHandler(
            console=Console(), show_time=False, markup=True
        )
        on_screen_handler_out.setLevel(LogLevel(level).value_for_logging)
        on_screen_handler_out.addFilter(
            lambda record: record.levelno < logging.WARNING
        )
        on_screen_handler_out.name = "CC stream stdout"
        root_logger.addHandler(on_screen_handler_out)

    if "CC stream stderr" not in handler_names:
        on_screen_handler_err = CoilcalcRichHandler(
            console=Console(stderr=True), show_time=False, markup=True
        )
        on_screen_handler_err.setLevel(LogLevel(level).value_for_logging)
        on_screen_handler_err.addFilter(
            lambda record: record.levelno >= logging.WARNING
        )
        on_screen_handler_err.name = "CC stream stderr"
        root_logger.addHandler(on_screen_handler_err)

    # what will be written to a file
    if logfilename is not None:
        recorded_handler = CoilcalcRichFileHandler(
            console=Console(
                file=open(logfilename, "a"),  # noqa: SIM115
                width=100,
                force_terminal=False,
                force_jupyter=False,
            )
        )
        recorded_handler.setLevel(logging.DEBUG)
        recorded_handler.name = "CC file out"
        root_logger.addHandler(recorded_handler)

    cc_logger.setLevel(logging.DEBUG)

    return cc_logger


def set_log_level(
    verbose: int | str = 1,
    *,
    increase: bool = False,
    logger_names: Iterable[str] = ("coilcalc",),
):
    """
    Get new log level and check if it is possible.

    Parameters
    ----------
    verbose:
        Amount the severity level of the logger should be changed by or to
    increase:
        Whether level should be increased by specified amount or changed to it
    logger_names:
        The loggers for which to set the level, default = ("coilcalc")
    """
    for logger_name in logger_names:
        logger = logging.getLogger(logger_name)

        current_level = logger.getEffectiveLevel() if increase else 0
        _modify_handler(
            LogLevel(verbose)
            if isinstance(verbose, str)
            else LogLevel(int(current_level + verbose)),
            logger,
        )


def get_log_level(logger_name: str = "coilcalc", *, as_str: bool = True) -> str | int:
    """
    Return the current logging level.

    Parameters
    ----------
    logger_name
        The named logger to get the level for.
    as_str
        If True then return the logging level as a string, else as an int.

    Returns
    -------
    :
        The logging level.
    """
    logger = logging.getLogger(logger_name)

    max_level = 0
    for handler in logger.handlers or logger.parent.handlers:
        if (
            not isinstance(handler, CoilcalcRichFileHandler)
            and handler.level > max_level
        ):
            max_level = LogLevel(handler.level).value
    if as_str:
        return LogLevel(max_level).name
    return max_level


def _modify_handler(new_level: LogLevel, logger: logging.Logger):
    """
    Change level of the logger from user's input.

    Parameters
    ----------
    new_level:
        Severity level for handler to be changed to, from set_log_level
    logger:
        Logger to be used
    """
    for handler in logger.handlers or logger.parent.handlers:
        if not isinstance(handler, CoilcalcRichFileHandler):
            handler.setLevel(new_level.value_for_logging)


class LoggingContext:
    """
    A context manager for temporarily adjusting the logging level

    Parameters
    ----------
    level:
        The coilcalc logging level to set within the context.
    """

    def __init__(self, level: str | int):
        self.level = level
        self.original_level = get_log_level()

    def __enter__(self):
        """
        Set the logging level to the new level when we enter the context.
        """
        set_log_level(self.level)

    def __exit__(self, type, value, traceback):  # noqa: A002
        """
        Set the logging level to the original level when we exit the context.
        """
        set_log_level(self.original_level)
