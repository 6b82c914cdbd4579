import logging
import os

from unittest.mock import patch

from fromposix.lib.environment import (
    EVBool,
    EVLog,
    EVStr,
    LogLevel,
    PosixFormatter,
    set_log_level,
)

from .. import TestBase


class TestLogLevel(TestBase):

    def test_from_verbosity(self):
        self.assertEqual(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertEqual(LogLevel.FromVerbosity(1), LogLevel.INFO)
        self.assertEqual(LogLevel.FromVerbosity(2), LogLevel.DEBUG)
        self.assertEqual(LogLevel.FromVerbosity(9), LogLevel.DEBUG)

    def test_set_log_level(self):
        set_log_level(LogLevel.DEBUG)
        self.assertEqual(logging.getLogger('fromposix.lib.posix.parser').getEffectiveLevel(), logging.DEBUG)
        set_log_level(LogLevel.DETACHED)
        self.assertFalse(logging.getLogger('fromposix.lib.posix.parser').isEnabledFor(logging.CRITICAL))
        set_log_level(logging.NOTSET)

    def test_formatter(self):
        formatter = PosixFormatter('{custom_level_name} in {name}: {message}', style='{')
        record = logging.LogRecord('fromposix', logging.WARNING, __file__, 1, 'oh no', None, None)
        self.assertEqual(formatter.format(record), 'warning in fromposix: oh no')


class TestEnvironmentSettings(TestBase):

    def test_bool(self):
        for value, expected in [
            ('1', True),
            ('0', False),
            ('yes', True),
            ('off', False),
            ('FALSE', False),
            ('', False),
        ]:
            with patch.dict(os.environ, {'FROMPOSIX_COLORLESS': value}):
                self.assertEqual(EVBool('COLORLESS').value, expected, msg=value)

    def test_bool_unset(self):
        with patch.dict(os.environ, clear=True):
            self.assertFalse(EVBool('COLORLESS').value)

    def test_log(self):
        with patch.dict(os.environ, {'FROMPOSIX_VERBOSITY': 'debug'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DEBUG)
        with patch.dict(os.environ, {'FROMPOSIX_VERBOSITY': '1'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.INFO)
        with patch.dict(os.environ, {'FROMPOSIX_VERBOSITY': 'nonsense'}):
            self.assertIsNone(EVLog('VERBOSITY').value)

    def test_str(self):
        with patch.dict(os.environ, clear=True):
            self.assertEqual(EVStr('ENCODING', 'utf8').value, 'utf8')
        with patch.dict(os.environ, {'FROMPOSIX_ENCODING': ' cp1252 '}):
            self.assertEqual(EVStr('ENCODING', 'utf8').value, 'cp1252')
