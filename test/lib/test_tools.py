import os

from unittest.mock import patch

from fromposix import parse_posix_exports
from fromposix.lib.environment import EVStr, environment
from fromposix.lib.tools import UnsupportedInput, is_text_encoding, normalize_input, text_from_buffer

from .. import TestBase


class TestInputNormalization(TestBase):

    def test_strings_pass_through(self):
        self.assertEqual(normalize_input('export A=1'), 'export A=1')

    def test_buffers(self):
        for data in (b'export A=1', bytearray(b'export A=1'), memoryview(b'export A=1')):
            self.assertEqual(normalize_input(data), 'export A=1')

    def test_byte_order_mark(self):
        self.assertEqual(normalize_input('\ufeffexport A=1'.encode('utf8')), 'export A=1')

    def test_latin1_fallback(self):
        self.assertEqual(text_from_buffer(b'A=\xe4', 'utf8'), 'A=\xe4')

    def test_explicit_encoding(self):
        self.assertEqual(text_from_buffer('A=1'.encode('utf-16le'), 'utf-16le'), 'A=1')

    def test_unknown_encoding(self):
        self.assertFalse(is_text_encoding('no-such-codec'))
        self.assertEqual(text_from_buffer(b'export A=1', 'no-such-codec'), 'export A=1')

    def test_encoding_that_does_not_produce_text(self):
        self.assertFalse(is_text_encoding('hex'))
        self.assertTrue(is_text_encoding('cp1252'))
        self.assertEqual(text_from_buffer(b'export A=1', 'hex'), 'export A=1')

    def test_configured_encoding_is_checked(self):
        with patch.dict(os.environ, {'FROMPOSIX_ENCODING': 'no-such-codec'}):
            with patch.object(environment, 'encoding', EVStr('ENCODING', 'utf8')):
                self.assertEqual(parse_posix_exports(b'export A=1'), [('A', '1')])

    def test_lists_are_joined(self):
        self.assertEqual(normalize_input(['export A=1', b'export B=2']), 'export A=1\nexport B=2')

    def test_unsupported_input(self):
        with self.assertRaises(UnsupportedInput):
            normalize_input(42)
        with self.assertRaises(TypeError):
            normalize_input(None)
        with self.assertRaises(TypeError):
            text_from_buffer(object())
