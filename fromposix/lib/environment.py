#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A common interface to all configuration settings available via environment variables. This module
is also host to the logging configuration.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')


class LogLevel(IntEnum):
    """
    The log levels of the standard library, extended by a level that silences all output. The
    command line maps the number of `-v` flags to a level with `LogLevel.FromVerbosity`.
    """
    NOTSET   = logging.NOTSET    # noqa
    DEBUG    = logging.DEBUG     # noqa
    INFO     = logging.INFO      # noqa
    WARNING  = logging.WARNING   # noqa
    ERROR    = logging.ERROR     # noqa
    CRITICAL = logging.CRITICAL  # noqa

    DETACHED = logging.CRITICAL + 100
    """
    Nothing is logged at all; the library is used from code and only reports through its return
    values and exceptions.
    """

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        if verbosity < 0:
            return cls.DETACHED
        return {
            0: cls.WARNING,
            1: cls.INFO,
        }.get(verbosity, cls.DEBUG)


class PosixFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, record.levelname.lower())
        return super().formatMessage(record)


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger which is configured with the default format.
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(PosixFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        logger.addHandler(stream)
    logger.propagate = False
    return logger


class EnvironmentVariableSetting(Generic[_T]):
    key: str
    value: Optional[_T]

    def __init__(self, name: str):
        self.key = F'FROMPOSIX_{name}'
        self.value = self.read()

    def read(self) -> _T:
        return None


class EVBool(EnvironmentVariableSetting[bool]):
    def read(self):
        value = os.environ.get(self.key, None)
        if value is None:
            return False
        else:
            value = value.lower().strip()
        if not value:
            return False
        if value.isdigit():
            return bool(int(value))
        return value not in {'no', 'off', 'false'}


class EVStr(EnvironmentVariableSetting[str]):
    def __init__(self, name: str, default: str):
        self.default = default
        super().__init__(name)

    def read(self):
        value = os.environ.get(self.key, '').strip()
        return value or self.default


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def read(self):
        try:
            loglevel = os.environ[self.key]
        except KeyError:
            return None
        if loglevel.isdigit():
            return LogLevel.FromVerbosity(int(loglevel))
        try:
            loglevel = LogLevel[loglevel.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity "{loglevel!r}"; pick from: {levels}')
            return None
        else:
            return loglevel


class environment:
    verbosity = EVLog('VERBOSITY')
    colorless = EVBool('COLORLESS')
    encoding = EVStr('ENCODING', 'utf8')


def set_log_level(level: int | LogLevel) -> None:
    """
    Set the log level for all loggers of the package; module loggers inherit it.
    """
    logging.getLogger('fromposix').setLevel(level)
